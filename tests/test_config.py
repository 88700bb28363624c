from spelint.config import Settings


def test_settings_normalizes_log_level() -> None:
    assert Settings(log_level="debug").log_level == "DEBUG"
    assert Settings(log_level=" info ").log_level == "INFO"


def test_settings_falls_back_on_unknown_log_level() -> None:
    assert Settings(log_level="loud").log_level == "WARNING"
    assert Settings(log_level="").log_level == "WARNING"
