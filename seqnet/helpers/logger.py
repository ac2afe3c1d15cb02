# helpers/logger.py
import csv, json, datetime, pathlib
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


class RunLogger:
    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
        self.root = pathlib.Path(root)
        self.dir = self.root / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.metrics = []  # list of dicts per logged iteration
        self._csv_header_written = False

    # ---------- logging ----------
    def log_iteration(self, iteration, **kwargs):
        row = {"iteration": int(iteration), **{k: float(v) for k, v in kwargs.items()}}
        self.metrics.append(row)
        with open(self.csv_path, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(row.keys()))
            if not self._csv_header_written:
                writer.writeheader()
                self._csv_header_written = True
            writer.writerow(row)

    def save_json(self, **summary):
        """Writes every logged row, plus any run summary fields, to history.json."""
        with open(self.json_path, "w") as f:
            json.dump({"history": self.metrics, **summary}, f, indent=2)
        return str(self.json_path)

    # ---------- plotting ----------
    def _plots_dir(self, subdir):
        out = self.dir / subdir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def plot_loss(self, history, tag="run", subdir="plots"):
        """
        Saves the loss curve as loss_curve_<tag>.png.
        history: {'iteration': [...], 'loss': [...]}
        """
        iterations = history.get("iteration", [])
        loss = history.get("loss", [])

        outdir = self._plots_dir(subdir)
        path = outdir / f"loss_curve_{tag}.png"
        plt.figure()
        if len(loss) > 0:
            plt.plot(iterations or range(len(loss)), loss, label="total squared error")
            plt.legend()
        plt.xlabel("Iteration")
        plt.ylabel("Squared Error")
        plt.title(f"Loss vs Iterations ({tag})")
        plt.tight_layout()
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)
