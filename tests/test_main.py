import json

import pytest

from main import DisplayConfig, Session, main


def test_one_shot_message(capsys):
    main(["-m", "aaaaa"])
    assert capsys.readouterr().out.strip() == "BDZG O"


def test_one_shot_with_flags_is_reversible(capsys):
    flags = ["--rotors", "II", "IV", "V", "--positions", "blq", "--reflector", "C",
             "--plugs", "AV BS CG", "--group", "5"]
    main(flags + ["-m", "attack at dawn"])
    cipher = capsys.readouterr().out.strip().replace(" ", "")
    main(flags + ["-m", cipher])
    assert capsys.readouterr().out.strip().replace(" ", "") == "ATTACKATDAWN"


def test_config_file(tmp_path, capsys):
    path = tmp_path / "key.json"
    path.write_text(json.dumps({"rotors": ["I", "II", "III"], "positions": "AAA", "reflector": "B"}))
    main(["--config", str(path), "-m", "HELLOWORLD"])
    assert capsys.readouterr().out.strip() == "ILBD AAMT AZ"


@pytest.mark.parametrize(
    "argv",
    [
        ["--rotors", "I", "II", "VI", "-m", "A"],
        ["--plugs", "AB AC", "-m", "A"],
        ["--debug", "lamp", "-m", "A"],
        ["--group", "0", "-m", "A"],
        ["--config", "/nonexistent/key.json", "-m", "A"],
    ],
)
def test_bad_settings_exit(argv):
    with pytest.raises(SystemExit):
        main(argv)


def test_session_feed_and_exit(machine_factory):
    s = Session(machine_factory(), DisplayConfig(clear=False))
    assert s.feed("aa a!")
    assert not s.feed("AA\x18AAAA")
    assert "".join(s.text) == "AAAAA"
    assert "".join(s.cipher) == "BDZGO"


def test_session_run_renders_until_blank_line(machine_factory, capsys):
    s = Session(machine_factory(), DisplayConfig(clear=False))
    answers = iter(["HELLO", "WORLD", ""])
    s.run(lambda prompt: next(answers))
    out = capsys.readouterr().out
    assert "ILBD AAMT AZ" in out
    assert s.machine.positions == "AAK"


def test_session_run_stops_on_eof(machine_factory, capsys):
    def reader(prompt):
        raise EOFError

    s = Session(machine_factory(), DisplayConfig(clear=False))
    s.run(reader)
    assert s.text == []


def test_malformed_config_file_exits(tmp_path):
    path = tmp_path / "key.json"
    path.write_text(json.dumps({"rotors": None, "positions": "AAA", "reflector": "B"}))
    with pytest.raises(SystemExit):
        main(["--config", str(path), "-m", "A"])
