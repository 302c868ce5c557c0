# grover2q/cli.py
import argparse, csv, logging, os, sys
from pathlib import Path

from .config import SimulatorConfig
from .grover import GroverAlgorithm
from .log import setup_logging
from .state import BASIS_LABELS

HEADER = ["step","name","description","p00","p01","p10","p11",
          "q0_x","q0_y","q0_z","q1_x","q1_y","q1_z"]

# ---------------------------------------------------------------------

def step_row(index, state, info):
    p = state.probabilities()
    b0 = state.bloch_coordinates(0)
    b1 = state.bloch_coordinates(1)
    return {
        "step": index, "name": info.name, "description": info.description,
        "p00": f"{p[0]:.12f}", "p01": f"{p[1]:.12f}", "p10": f"{p[2]:.12f}", "p11": f"{p[3]:.12f}",
        "q0_x": f"{b0.x:.12f}", "q0_y": f"{b0.y:.12f}", "q0_z": f"{b0.z:.12f}",
        "q1_x": f"{b1.x:.12f}", "q1_y": f"{b1.y:.12f}", "q1_z": f"{b1.z:.12f}",
    }

def write_csv(path, grover):
    """Create/overwrite CSV with header and one row per recorded step."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        w.writeheader()
        for i, (state, info) in enumerate(grover.history()):
            w.writerow(step_row(i, state, info))

def format_step(index, state, info, marker=" "):
    probs = "  ".join(f"{lbl}={p * 100:5.1f}%" for lbl, p in zip(BASIS_LABELS, state.probabilities()))
    b0 = state.bloch_coordinates(0)
    b1 = state.bloch_coordinates(1)
    return (f"{marker}{index:>3}  {info.name:<14} {probs}"
            f"  q0=({b0.x:+.3f},{b0.y:+.3f},{b0.z:+.3f})"
            f"  q1=({b1.x:+.3f},{b1.y:+.3f},{b1.z:+.3f})")

def format_circuit(circuit):
    return " -> ".join(g.value for g in circuit.gates) or "(no gates)"

# ---------------------------------------------------------------------
# subcommands

def cmd_run(args, cfg):
    g = GroverAlgorithm(cfg)
    g.run(args.iterations)
    if args.step is not None and not g.set_step(args.step):
        print(f"  step {args.step} out of range; showing step 0", file=sys.stderr)
    print(f"[run] Grover, {g.iterations} iteration(s), {g.total_steps()} steps")
    for i, (state, info) in enumerate(g.history()):
        print(format_step(i, state, info, marker=">" if i == g.current_step else " "))
    info = g.current_step_info()
    circuit = g.current_circuit()
    print(f"\n  {g.current_step + 1} / {g.total_steps()}  {info.name}: {info.description}")
    print(f"  {circuit.title}: {format_circuit(circuit)}")
    return 0

def cmd_export(args, cfg):
    g = GroverAlgorithm(cfg)
    g.run(args.iterations)
    out_path = args.out or cfg.csv_path(g.iterations)
    print(f"[run] Export → {out_path}")
    write_csv(out_path, g)
    print(f"✓ {g.total_steps()} rows written.")
    return 0

def cmd_plot(args, cfg):
    from .plot_results import load_rows, plot_probabilities
    k = cfg.iterations if args.iterations is None else args.iterations
    csv_path = Path(args.csv) if args.csv else cfg.csv_path(k)
    if not csv_path.exists():
        print(f"No CSV found at {csv_path}; run `export` first.", file=sys.stderr)
        return 1
    rows = load_rows(csv_path)
    out_path = Path(args.out) if args.out else csv_path.with_suffix(".png")
    plot_probabilities(rows, out_path, title=csv_path.stem)
    print(f"Saved {out_path}")
    return 0

# ---------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(description="grover2q: step-by-step 2-qubit Grover simulator")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--data-dir", type=str, default=None, help="output folder (default: data/)")
    p.add_argument("--no-check-norm", action="store_true", help="skip per-step normalisation check")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="print every recorded step")
    p_run.add_argument("--iterations", "-k", type=int, default=None)
    p_run.add_argument("--step", type=int, default=None, help="step to mark as current")

    p_export = sub.add_parser("export", help="write the step history to CSV")
    p_export.add_argument("--iterations", "-k", type=int, default=None)
    p_export.add_argument("--out", type=str, default=None)

    p_plot = sub.add_parser("plot", help="plot probabilities vs step from an exported CSV")
    p_plot.add_argument("--csv", type=str, default=None)
    p_plot.add_argument("--iterations", "-k", type=int, default=None, help="pick data/grover_k{K}.csv when --csv is not given")
    p_plot.add_argument("--out", type=str, default=None)
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    cfg = SimulatorConfig(check_norm=not args.no_check_norm)
    if args.data_dir:
        cfg.data_dir = Path(args.data_dir)

    if args.cmd == "run":
        return cmd_run(args, cfg)
    elif args.cmd == "export":
        return cmd_export(args, cfg)
    elif args.cmd == "plot":
        return cmd_plot(args, cfg)

if __name__ == "__main__":
    sys.exit(main())
