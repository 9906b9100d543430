from jpread.settings import Settings, load_settings

def test_defaults_without_file(tmp_path):
    assert load_settings(tmp_path / "none.json", environ={}) == Settings(indent=2, sort_keys=False, debug=False)

def test_values_from_file(tmp_path):
    p = tmp_path / ".jpread.json"
    p.write_text('{"indent": 4, "sort_keys": true, "debug": true, "other": 1}', encoding="utf-8")
    assert load_settings(p, environ={}) == Settings(indent=4, sort_keys=True, debug=True)

def test_bad_values_fall_back(tmp_path):
    p = tmp_path / ".jpread.json"
    p.write_text('{"indent": "wide", "sort_keys": "yes", "debug": 1}', encoding="utf-8")
    assert load_settings(p, environ={}) == Settings()

def test_invalid_file_is_ignored(tmp_path):
    p = tmp_path / ".jpread.json"
    p.write_text("{oops", encoding="utf-8")
    assert load_settings(p, environ={}) == Settings()
    p.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(p, environ={}) == Settings()

def test_environment_overrides_file(tmp_path):
    p = tmp_path / ".jpread.json"
    p.write_text('{"indent": 4, "debug": true}', encoding="utf-8")
    env = {"JPREAD_INDENT": "1", "JPREAD_SORT_KEYS": "on", "JPREAD_DEBUG": "0"}
    assert load_settings(p, environ=env) == Settings(indent=1, sort_keys=True, debug=False)

def test_bad_indent_in_environment_is_ignored(tmp_path):
    assert load_settings(tmp_path / "none.json", environ={"JPREAD_INDENT": "-3"}).indent == 2
