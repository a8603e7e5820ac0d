import io
import random

import yaml

from densepack.harness import Reporter, build_cases, main, run_case, run_tests


def test_build_cases_shapes():
    cases = build_cases(random.Random(1))
    assert [len(data) for _, data in cases] == [3, 9, 50, 100, 500, 1000, 300, 300, 300, 900]
    for _, data in cases:
        assert all(1 <= n <= 300 for n in data)


def test_build_cases_custom_random_sizes():
    cases = build_cases(random.Random(1), random_sizes=[5])
    assert len(cases) == 7
    assert cases[2][0] == "Random 5 numbers"


def test_build_cases_repeatable_with_seed():
    assert build_cases(random.Random(7)) == build_cases(random.Random(7))


def test_run_case():
    result = run_case("short", [1, 2, 3])
    assert result.encoded == "BgkY"
    assert result.round_trip_ok
    assert result.ratio == 0.8


def test_reporter_writes_console_and_sink(capsys):
    sink = io.StringIO()
    Reporter(sink, preview_length=5).report(run_case("short", [10, 20, 30]))
    written = sink.getvalue()
    assert written == capsys.readouterr().out
    assert "Test: short\n" in written
    assert "Source string (trivial): 10,20...\n" in written
    assert "Decoded array correct? Yes\n" in written
    assert written.endswith("-" * 54 + "\n")


def test_reporter_without_sink(capsys):
    Reporter().log("hello")
    assert capsys.readouterr().out == "hello\n"


def test_run_tests_all_round_trip(capsys):
    sink = io.StringIO()
    results = run_tests({"harness": {"seed": 3}}, sink)
    assert len(results) == 10
    assert all(r.round_trip_ok for r in results)
    assert sink.getvalue().count("Decoded array correct? Yes") == 10


def test_main_appends_to_log_file(tmp_path, capsys):
    log_file = tmp_path / "output.txt"
    log_file.write_text("previous run\n")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump({
        "harness": {"log_file": str(log_file), "seed": 11, "random_sizes": [4]},
    }))

    assert main(str(config_file)) == 0
    content = log_file.read_text()
    assert content.startswith("previous run\n")
    assert content.count("Test: ") == 7
