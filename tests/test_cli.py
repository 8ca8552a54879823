"""
End-to-end tests for the bash-bundler command line.
"""
import shutil
import subprocess
from pathlib import Path

import pytest

from bash_bundler import main

REPO_ROOT = Path(__file__).parent.parent

HAS_SH = shutil.which("sh") is not None

ONE_EXPECTED = '''yell() {
    echo "$1 !!!" | tr '[:lower:]' '[:upper:]'
}
print() {
    echo "$1"
}
yell "hallo"
print "hallo"
'''

SOURCE_EXPECTED = '''yell() {
    echo "$1 !!!" | tr '[:lower:]' '[:upper:]'
}
print() {
    echo "$1"
}

this_is_from_sourced_file() {
    yell "$1 !!!!!!"
}

yell "hallo"
print "hallo"
'''


def run_cli(capsys, *args):
    """Run main() and return (exit code, stdout, stderr)."""
    code = 0
    try:
        main(list(args))
    except SystemExit as e:
        code = e.code
    out, err = capsys.readouterr()
    return code, out, err


def run_shell(script):
    return subprocess.run(["sh", "-c", script], capture_output=True, text=True).stdout


class TestCli:
    """Tests for bash_bundler.main()."""

    def test_comment(self, capsys, fixtures_dir):
        code, out, _ = run_cli(capsys, str(fixtures_dir / "one.sh"))

        assert code == 0
        assert out == ONE_EXPECTED

    @pytest.mark.skipif(not HAS_SH, reason="needs a POSIX shell")
    def test_comment_output_runs(self, capsys, fixtures_dir):
        _, out, _ = run_cli(capsys, str(fixtures_dir / "one.sh"))
        assert run_shell(out) == "HALLO !!!\nhallo\n"

    def test_comment_disabled(self, capsys, fixtures_dir):
        _, out, _ = run_cli(capsys, str(fixtures_dir / "one.sh"), "--disable-comment")

        assert out == '''# import ./bash/one_utils.sh
# import ./bash/one_more_utils.sh
yell "hallo"
print "hallo"
'''

    def test_source(self, capsys, fixtures_dir):
        code, out, _ = run_cli(capsys, str(fixtures_dir / "source.sh"), "--enable-source")

        assert code == 0
        assert out == SOURCE_EXPECTED

    @pytest.mark.skipif(not HAS_SH, reason="needs a POSIX shell")
    def test_source_output_runs(self, capsys, fixtures_dir):
        _, out, _ = run_cli(capsys, str(fixtures_dir / "source.sh"), "--enable-source")
        assert run_shell(out) == "HALLO !!!\nhallo\n"

    def test_source_disabled(self, capsys, fixtures_dir):
        _, out, _ = run_cli(capsys, str(fixtures_dir / "source.sh"))

        assert out == '''source ./bash/source_utils.sh

yell "hallo"
print "hallo"
'''

    def test_config(self, capsys, monkeypatch):
        """root_path in the config is relative to the working directory."""
        monkeypatch.chdir(REPO_ROOT)

        code, out, _ = run_cli(capsys, "--config", "./tests/fixtures/test_config.toml")

        assert code == 0
        assert out == SOURCE_EXPECTED

    def test_config_replaces_arguments(self, capsys, write_script, fixtures_dir):
        config = write_script(
            "bundle.toml",
            f'[builder]\nroot_path = "{(fixtures_dir / "one.sh").as_posix()}"\nreplace_comment = false\n',
        )

        _, out, _ = run_cli(capsys, "-c", str(config), str(fixtures_dir / "two.sh"))

        assert out.startswith("# import ./bash/one_utils.sh\n")

    def test_file_or_config_required(self, capsys):
        code, out, _ = run_cli(capsys)

        assert code != 0
        assert out == ""

    def test_missing_root_file(self, capsys, tmp_path):
        code, out, _ = run_cli(capsys, str(tmp_path / "missing.sh"))

        assert code != 0
        assert out == ""

    def test_circular(self, capsys, fixtures_dir):
        code, out, err = run_cli(capsys, str(fixtures_dir / "circular.sh"))

        assert code == 1
        assert out == ""
        assert "Error: Circular import found" in err

    def test_config_without_root_path(self, capsys, write_script):
        config = write_script("bundle.toml", "[builder]\nreplace_source = true\n")

        code, out, err = run_cli(capsys, "--config", str(config))

        assert code == 1
        assert out == ""
        assert "Error:" in err

    def test_malformed_config(self, capsys, write_script):
        config = write_script("bundle.toml", "[builder]\nreplace_comment = 3.5\n")

        code, out, err = run_cli(capsys, "--config", str(config))

        assert code == 1
        assert out == ""
        assert "replace_comment" in err

    def test_verbose_logs_to_stderr(self, capsys, fixtures_dir):
        code, out, err = run_cli(capsys, str(fixtures_dir / "one.sh"), "--verbose")

        assert code == 0
        assert out == ONE_EXPECTED
        assert "DEBUG:" in err
        assert "./bash/one_utils.sh" in err
