from find_chinese_text import iter_files, main, scan_file


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_scan_file_reports_lines(tmp_path):
    path = _write(tmp_path / "page.tsx", "const a = 'Home';\nconst b = '首页';\n")
    findings = list(scan_file(path))
    assert len(findings) == 1
    assert findings[0].line == 2
    assert findings[0].characters == ("首", "页")


def test_iter_files_skips_vendor_dirs_and_excludes(tmp_path):
    _write(tmp_path / "app" / "page.tsx", "x")
    _write(tmp_path / "node_modules" / "lib.js", "x")
    _write(tmp_path / "locales" / "zh.json", "x")
    _write(tmp_path / "notes.md", "x")
    files = sorted(p.name for p in iter_files([str(tmp_path)], {".tsx", ".js", ".json"}, ["locales/zh.json"]))
    assert files == ["page.tsx"]


def test_main_exit_codes(tmp_path, capsys):
    _write(tmp_path / "data" / "player.json", '{"name": "杨瀚森"}')
    assert main(["--targets", str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "[chinese-check] found 3 Chinese character(s) on 1 line(s):" in out
    assert main(["--targets", str(tmp_path), "--warn-only"]) == 0


def test_main_clean_tree(tmp_path, capsys):
    _write(tmp_path / "app" / "page.tsx", "export default 'Home';")
    assert main(["--targets", str(tmp_path), "--ext", "tsx"]) == 0
    assert "no Chinese text found" in capsys.readouterr().out
