from unittest.mock import patch

import pytest

import main


@pytest.mark.unit
def test_missing_token_exits_before_serving(monkeypatch):
    monkeypatch.delenv("CANVAS_ACCESS_TOKEN", raising=False)

    with patch("main.run") as run:
        with pytest.raises(SystemExit) as exc:
            main.main()

    assert exc.value.code == 1
    run.assert_not_called()


@pytest.mark.unit
def test_valid_settings_start_server(monkeypatch):
    monkeypatch.setenv("CANVAS_ACCESS_TOKEN", "abc")

    with patch("main.run") as run:
        main.main()

    run.assert_called_once_with()
