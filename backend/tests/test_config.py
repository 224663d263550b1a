from config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.default_top_n == 3
    assert s.max_history_items == 500
    assert s.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_TOP_N", "5")
    monkeypatch.setenv("MAX_HISTORY_ITEMS", "50")
    s = Settings(_env_file=None)
    assert s.default_top_n == 5
    assert s.max_history_items == 50


def test_only_used_settings():
    assert set(Settings.model_fields) == {"default_top_n", "max_history_items", "log_level"}
