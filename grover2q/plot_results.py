# grover2q/plot_results.py
import csv, os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .state import BASIS_LABELS

PROB_KEYS = ["p00", "p01", "p10", "p11"]
FLOAT_KEYS = PROB_KEYS + ["q0_x","q0_y","q0_z","q1_x","q1_y","q1_z"]

def load_rows(path):
    rows = []
    with open(path, "r", newline="") as f:
        r = csv.DictReader(f)
        for row in r:
            row["step"] = int(row["step"])
            for k in FLOAT_KEYS:
                row[k] = float(row[k])
            rows.append(row)
    return sorted(rows, key=lambda r: r["step"])

def plot_probabilities(rows, out_path, title="grover"):
    if not rows: return None
    xs = [r["step"] for r in rows]
    fig = plt.figure()
    for key, lbl in zip(PROB_KEYS, BASIS_LABELS):
        plt.plot(xs, [r[key] for r in rows], marker="o", label=lbl)
    plt.xticks(xs, [r["name"] for r in rows], rotation=45, ha="right")
    plt.ylim(-0.05, 1.05)
    plt.ylabel("Probability")
    plt.title(f"Basis-state probabilities [{title}]")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()
    os.makedirs(os.path.dirname(str(out_path)) or ".", exist_ok=True)
    plt.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path
