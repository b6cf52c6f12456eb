"""Unit tests for the command line entry point."""

import bcrypt

from advisor_portal import cli


class TestParser:
    def test_serve_arguments(self):
        args = cli.build_parser().parse_args(
            ["serve", "--host", "127.0.0.1", "--port", "9000", "--reload"]
        )
        assert args.command == "serve"
        assert args.host == "127.0.0.1"
        assert args.port == 9000
        assert args.reload is True
        assert args.func is cli.serve

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 1
        assert "serve" in capsys.readouterr().out


class TestHashPassword:
    def test_prints_bcrypt_hash(self, monkeypatch, capsys):
        monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: "s3cret-pass")

        assert cli.main(["hash-password"]) == 0

        hashed = capsys.readouterr().out.strip()
        assert bcrypt.checkpw(b"s3cret-pass", hashed.encode())

    def test_mismatch(self, monkeypatch, capsys):
        answers = iter(["first-pass", "second-pass"])
        monkeypatch.setattr(cli.getpass, "getpass", lambda prompt: next(answers))

        assert cli.main(["hash-password"]) == 1
        assert "do not match" in capsys.readouterr().err
