import pytest

from scaraplot.cli import main


def _data_lines(out: str):
    return [line for line in out.splitlines() if line]


def test_main_succeeds_and_starts_at_first_control_point(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\n")
    lines = _data_lines(out)
    assert lines
    assert lines[0].startswith("t: 0.000000\tx: 100.000000\ty: 50.000000\t")
    assert all("t0:" in line and "t1:" in line for line in lines)


def test_main_times_follow_step(capsys):
    assert main(["--time-step", "0.1"]) == 0
    lines = _data_lines(capsys.readouterr().out)
    times = [float(line.split("\t")[0].split()[1]) for line in lines]
    assert times == pytest.approx([i * 0.1 for i in range(len(times))], abs=1e-6)


def test_coarser_step_prints_fewer_samples(capsys):
    main([])
    fine = len(_data_lines(capsys.readouterr().out))
    main(["--time-step", "0.5"])
    coarse = len(_data_lines(capsys.readouterr().out))
    assert 0 < coarse < fine


@pytest.mark.parametrize("step", ["0", "-1"])
def test_non_positive_step_rejected(step):
    with pytest.raises(SystemExit) as info:
        main(["--time-step", step])
    assert info.value.code == 2