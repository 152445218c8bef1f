from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..auditor import extract_text_nodes, get_auditor

router = APIRouter(prefix="/api/audit", tags=["audit"])


class AuditRequest(BaseModel):
    locale: str = "en"
    texts: list[str] = []
    html: Optional[str] = None  # Rendered page markup


@router.post("")
async def audit_rendered_text(req: AuditRequest):
    auditor = get_auditor()
    if not auditor.enabled:
        raise HTTPException(status_code=404, detail="Not found")
    texts = list(req.texts)
    if req.html:
        texts = extract_text_nodes(req.html) + texts
    return auditor.audit_texts(texts, req.locale).model_dump()
