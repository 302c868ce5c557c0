# grover2q/tests/test_cli.py
import numpy as np
from grover2q.cli import main, HEADER
from grover2q.plot_results import load_rows

def test_export_and_load(tmp_path):
    assert main(["--data-dir", str(tmp_path), "export", "-k", "2"]) == 0
    path = tmp_path / "grover_k2.csv"
    assert path.read_text().splitlines()[0] == ",".join(HEADER)
    rows = load_rows(path)
    assert [r["step"] for r in rows] == list(range(6))
    assert rows[3]["name"] == "Diffusion 1"
    assert np.allclose([rows[3][k] for k in ("p00", "p01", "p10", "p11")], [0, 0, 0, 1], atol=1e-9)
    assert np.allclose([rows[0][k] for k in ("q0_x", "q0_y", "q0_z")], [0, 0, 1])

def test_plot_from_csv(tmp_path):
    csv_path = tmp_path / "run.csv"
    main(["export", "-k", "1", "--out", str(csv_path)])
    out = tmp_path / "plots" / "run.png"
    assert main(["plot", "--csv", str(csv_path), "--out", str(out)]) == 0
    assert out.exists() and out.stat().st_size > 0

def test_plot_missing_csv(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path), "plot"]) == 1
    assert "export" in capsys.readouterr().err

def test_run_prints_steps(capsys):
    assert main(["run", "-k", "1", "--step", "3"]) == 0
    out = capsys.readouterr().out
    assert "4 steps" in out
    assert ">  3  Diffusion 1" in out
    assert "|11⟩=100.0%" in out
    assert "Diffusion: Amplitude Amplification: H1 -> H0 -> Oracle -> Diffusion" in out

def test_run_bad_step_keeps_cursor_at_zero(capsys):
    assert main(["run", "-k", "0", "--step", "9"]) == 0
    captured = capsys.readouterr()
    assert "out of range" in captured.err
    assert ">  0  Initial" in captured.out

def test_plot_picks_csv_by_iterations(tmp_path):
    main(["--data-dir", str(tmp_path), "export", "-k", "3"])
    assert main(["--data-dir", str(tmp_path), "plot", "-k", "3"]) == 0
    assert (tmp_path / "grover_k3.csv").exists()
    assert (tmp_path / "grover_k3.png").exists()
