import pytest

from syncdemos.producer_consumer import main, run_with_condition, run_with_semaphores


def _split(lines):
    pairs = [line.split(": ") for line in lines]
    return [int(label) for label, _ in pairs], [int(value) for _, value in pairs]


def test_final_count_is_zero_with_condition():
    lines = []
    assert run_with_condition(200, 5, lines.append) == 0
    assert len(lines) == 400


def test_final_count_is_zero_with_semaphores():
    lines = []
    assert run_with_semaphores(200, 5, lines.append) == 0
    assert len(lines) == 400


def test_count_stays_within_bounds():
    condition_lines = []
    semaphore_lines = []
    run_with_condition(300, 4, condition_lines.append)
    run_with_semaphores(300, 4, semaphore_lines.append)
    _, condition_values = _split(condition_lines)
    _, semaphore_values = _split(semaphore_lines)
    assert all(0 <= value <= 4 for value in condition_values)
    assert all(0 <= value <= 4 for value in semaphore_values)
    assert len(condition_values) == 600
    assert len(semaphore_values) == 600


def test_capacity_one_alternates():
    condition_lines = []
    semaphore_lines = []
    run_with_condition(50, 1, condition_lines.append)
    run_with_semaphores(50, 1, semaphore_lines.append)
    assert _split(condition_lines)[1] == [1, 0] * 50
    assert _split(semaphore_lines)[1] == [1, 0] * 50


def test_two_threads_report():
    condition_lines = []
    semaphore_lines = []
    run_with_condition(20, 3, condition_lines.append)
    run_with_semaphores(20, 3, semaphore_lines.append)
    assert len(set(_split(condition_lines)[0])) == 2
    assert len(set(_split(semaphore_lines)[0])) == 2


def test_zero_iterations():
    condition_lines = []
    semaphore_lines = []
    assert run_with_condition(0, 3, condition_lines.append) == 0
    assert run_with_semaphores(0, 3, semaphore_lines.append) == 0
    assert condition_lines == []
    assert semaphore_lines == []


def test_invalid_arguments_with_condition():
    with pytest.raises(ValueError):
        run_with_condition(10, 0, print)
    with pytest.raises(ValueError):
        run_with_condition(-1, 5, print)


def test_invalid_arguments_with_semaphores():
    with pytest.raises(ValueError):
        run_with_semaphores(10, 0, print)
    with pytest.raises(ValueError):
        run_with_semaphores(-1, 5, print)


@pytest.mark.parametrize("method", ["condition", "semaphore"])
def test_main_reports_ok(method, capsys):
    assert main(["--method", method, "--iterations", "10", "--capacity", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "OK counter=0"
    assert len(out) == 21