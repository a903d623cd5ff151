import builtins

import pytest

import shop


@pytest.fixture
def shop_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PURCHASES_DIR", str(tmp_path / "purchases"))
    monkeypatch.delenv("LOCALES_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return tmp_path


def script_input(monkeypatch, *answers):
    remaining = [str(a) for a in answers]

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)


def test_full_session_exits_with_zero(shop_env, monkeypatch, capsys):
    script_input(monkeypatch, 2, 2, 1, 3, 6)

    with pytest.raises(SystemExit) as exc:
        shop.main()

    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "1. Mostrar productos disponibles" in out
    assert "Gracias por comprar con nosotros" in out
    (receipt,) = (shop_env / "purchases").glob("purchase_*.txt")
    assert "Banana - $0.79 x 3 = $2.37" in receipt.read_text(encoding="utf-8")


def test_end_of_input_shuts_down(shop_env, monkeypatch, capsys):
    script_input(monkeypatch, 1, 1)

    with pytest.raises(SystemExit) as exc:
        shop.main()

    assert exc.value.code == 130
    assert "Shutting down..." in capsys.readouterr().err
    assert not (shop_env / "purchases").exists()
