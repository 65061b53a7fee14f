# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import sys

import pytest

from seedrsa import __main__ as cli
from seedrsa.rsa import Keypair


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["seedrsa", *argv])
    cli.main()


@pytest.fixture
def keyfiles(tmp_path, monkeypatch, seed_one, test_seed):
    key, pub = tmp_path / "me.key", tmp_path / "me.pub"
    run_cli(monkeypatch, "-n", "keygen", "--key", str(key), "--public-key", str(pub), "--seed-p", seed_one.hex(),
            "--seed-q", test_seed.hex())
    return key, pub


def test_keygen(keyfiles, keypair):
    key, pub = keyfiles
    assert Keypair.import_key(key) == keypair
    assert pub.exists()


def test_encrypt_decrypt(keyfiles, monkeypatch, capsys):
    key, pub = keyfiles
    capsys.readouterr()
    with pytest.warns(RuntimeWarning):
        run_cli(monkeypatch, "-n", "encrypt", "--public-key", str(pub), "--message", "HelloWorld!")
    ciphertext = capsys.readouterr().out.strip()
    assert ciphertext.startswith(",")
    run_cli(monkeypatch, "-n", "decrypt", "--key", str(key), "--message", ciphertext)
    assert capsys.readouterr().out.strip() == "HelloWorld!"


def test_encrypt_unencodable_message(keyfiles, monkeypatch, capsys):
    _, pub = keyfiles
    capsys.readouterr()
    with pytest.warns(RuntimeWarning), pytest.raises(SystemExit) as exited:
        run_cli(monkeypatch, "-n", "encrypt", "--public-key", str(pub), "--message", "héllo", "--encoding", "ascii")
    assert exited.value.code == 1
    assert "cannot be encoded as ascii" in capsys.readouterr().out


def test_decrypt_from_file(keyfiles, keypair, monkeypatch, capsys, tmp_path):
    key, _ = keyfiles
    payload = tmp_path / "payload.txt"
    payload.write_text(keypair.encrypt(b"From a file") + "\n", encoding="ascii")
    capsys.readouterr()
    run_cli(monkeypatch, "-n", "decrypt", "--key", str(key), "--message", f"P:{payload}")
    assert capsys.readouterr().out.strip() == "From a file"


def test_identity(keyfiles, keypair, monkeypatch, capsys):
    key, _ = keyfiles
    capsys.readouterr()
    run_cli(monkeypatch, "-n", "identity", "--key", str(key))
    assert capsys.readouterr().out.strip() == keypair.public_key_display()


def test_keygen_refuses_overwrite(keyfiles, monkeypatch, capsys, mocker):
    key, pub = keyfiles
    gen = mocker.patch("seedrsa.rsa.Keypair.generate")
    run_cli(monkeypatch, "-n", "keygen", "--key", str(key), "--public-key", str(pub))
    assert "already exists" in capsys.readouterr().out
    gen.assert_not_called()


def test_keygen_random_seeds(tmp_path, monkeypatch, capsys, mocker):
    gen = mocker.patch("seedrsa.rsa.Keypair.generate", return_value=Keypair(17, 413, 3233))
    key, pub = tmp_path / "me.key", tmp_path / "me.pub"
    run_cli(monkeypatch, "keygen", "--key", str(key), "--public-key", str(pub))
    out = capsys.readouterr().out
    assert out.count("Generated seed: ") == 2
    seed_p, seed_q = gen.call_args.args
    assert seed_p != seed_q
    assert Keypair.import_key(key) == Keypair(17, 413, 3233)


def test_keygen_same_seeds(tmp_path, monkeypatch, test_seed):
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, "-n", "keygen", "--key", str(tmp_path / "k"), "--public-key", str(tmp_path / "p"),
                "--seed-p", test_seed.hex(), "--seed-q", test_seed.hex())


def test_missing_argument_non_interactive(monkeypatch):
    with pytest.raises(IOError):
        run_cli(monkeypatch, "-n", "identity")


def test_interactive_prompt(keyfiles, keypair, monkeypatch, capsys):
    key, _ = keyfiles
    answers = iter(["identity", str(key)])
    monkeypatch.setattr("builtins.input", lambda _: next(answers))
    run_cli(monkeypatch)
    assert keypair.public_key_display() in capsys.readouterr().out
