import json
import logging

import pytest

from enigma_machine import random_machine
from enigma_machine.cli import DEMO_TEXT, main
from enigma_machine.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    for handler in logging.getLogger("enigma_machine").handlers:
        handler.close()
    logging.getLogger("enigma_machine").handlers.clear()
    logging.getLogger("enigma_machine").setLevel(logging.NOTSET)


@pytest.fixture
def config_file(tmp_path, capsys):
    path = tmp_path / "machine.json"
    main(["generate", "--key", "CTR", "--seed", "42", "--outfile", str(path)])
    capsys.readouterr()
    return path


def test_generate_stdout_is_deterministic(capsys):
    main(["generate", "--key", "ABCD", "--seed", "7"])
    first = capsys.readouterr().out
    main(["generate", "--key", "ABCD", "--seed", "7"])
    assert capsys.readouterr().out == first

    cfg = json.loads(first)
    assert cfg["key"] == "ABCD"
    assert len(cfg["rotors"]) == 4


def test_generate_outfile(tmp_path, capsys):
    path = tmp_path / "out.json"
    main(["generate", "--key", "QQ", "--outfile", str(path)])
    assert "Wrote" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8"))["key"] == "QQ"


def test_encode_round_trip(config_file, capsys):
    main(["encode", "--config", str(config_file), "attack", "at", "dawn!"])
    cipher = capsys.readouterr().out.strip()
    assert cipher != "ATTACK AT DAWN!"
    assert cipher.endswith("!")

    main(["encode", "--config", str(config_file), cipher])
    assert capsys.readouterr().out.strip() == "ATTACK AT DAWN!"


def test_status(config_file, capsys):
    main(["status", "--config", str(config_file)])
    out = capsys.readouterr().out
    assert out.startswith("plugboard:")
    assert "rotor  0:" in out and "rotor  2:" in out
    assert "pos =  2 (" in out
    assert "reflector:" in out


def test_demo_recovers_plaintext(capsys):
    main(["demo"])
    out = capsys.readouterr().out
    assert f"plaintext:  {DEMO_TEXT}" in out
    assert f"decrypted:  {DEMO_TEXT}" in out
    assert out.count("plugboard:") == 4


def test_missing_config_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["status", "--config", str(tmp_path / "nope.json")])
    assert "status failed" in str(exc.value.code)


def test_invalid_config_exits(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"key": "AB", "rotors": ["I"], "reflector": "B"}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["encode", "--config", str(path), "HI"])
    assert "1 rotors" in str(exc.value.code)


def test_setup_logging_does_not_stack_handlers(tmp_path):
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    assert len(logging.getLogger("enigma_machine").handlers) == 1

    log_file = tmp_path / "enigma.log"
    setup_logging(logging.INFO, str(log_file))
    assert len(logging.getLogger("enigma_machine").handlers) == 2

    main_logger = logging.getLogger("enigma_machine")
    random_machine("AB", seed=1)
    for handler in main_logger.handlers:
        handler.flush()
    assert "machine ready: 2 rotors, key AB" in log_file.read_text(encoding="utf-8")


def test_non_utf8_config_exits(tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(SystemExit) as exc:
        main(["status", "--config", str(path)])
    assert "status failed" in str(exc.value.code)


def test_bad_plugboard_config_exits(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"key": "A", "rotors": ["I"], "reflector": "B", "plugboard": [1, 2]}),
                    encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["status", "--config", str(path)])
    assert "'plugboard' must be" in str(exc.value.code)
