import os
import re
import subprocess
import sys

import beta_sample

LINE = re.compile(r"^beta\(2,1\) sample: (\S+)$")
SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "beta_sample.py")


def check_lines(lines, n):
    assert len(lines) == n, f"Expected {n} lines, got {len(lines)}"
    for line in lines:
        match = LINE.match(line)
        assert match, f"Unexpected line: {line!r}"
        assert 0 <= float(match.group(1)) <= 1


def test_default_run(capsys):
    assert beta_sample.main([]) == 0
    out = capsys.readouterr().out
    check_lines(out.splitlines(), beta_sample.N)


def test_cli_overrides(capsys):
    assert beta_sample.main(["--n", "3", "--a", "0.5", "--b", "2.5", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.startswith("beta(0.5,2.5) sample: ") for line in lines)


def test_seeded_output_repeats(capsys):
    beta_sample.main(["--seed", "11"])
    first = capsys.readouterr().out
    beta_sample.main(["--seed", "11"])
    assert capsys.readouterr().out == first


def test_summary(capsys):
    assert beta_sample.main(["--n", "100", "--summary", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    check_lines(lines[:100], 100)
    assert "mean" in out and "var" in out


def test_zero_samples(capsys):
    assert beta_sample.main(["--n", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_invalid_shape(capsys):
    assert beta_sample.main(["--a", "-1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")


def test_end_to_end():
    proc = subprocess.run([sys.executable, SCRIPT], capture_output=True, text=True, cwd=os.path.dirname(SCRIPT))
    assert proc.returncode == 0, proc.stderr
    check_lines(proc.stdout.splitlines(), 5)
