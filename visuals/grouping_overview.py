import os
import argparse
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def _ensure_dir(path):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

def plot_groups(csv_path, out_path, title_note=""):
    df = pd.read_csv(csv_path)
    sizes = df.groupby("method", sort=False)["item"].size().sort_values(ascending=False)

    _ensure_dir(out_path)
    plt.figure(figsize=(9, 5))
    plt.bar(sizes.index.astype(str), sizes.values)
    ttl_extra = f" [{title_note}]" if title_note else ""
    plt.title(f"Delivery groups{ttl_extra}")
    plt.xlabel("Delivery method")
    plt.ylabel("Basket entries")
    plt.xticks(rotation=30, ha="right")
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    plt.close()
    print(f"Saved: {os.path.abspath(out_path)}")
    return sizes

def main():
    parser = argparse.ArgumentParser(description="Delivery group size plot")
    parser.add_argument("--csv", type=str, default="outputs/split_result.csv",
                        help="Split result CSV (method, item, line)")
    parser.add_argument("--basket", type=str, default="basket.json",
                        help="Basket file used, for naming plots")
    parser.add_argument("--out_dir", type=str, default="visuals", help="Output directory")
    args = parser.parse_args()

    basket_name = os.path.splitext(os.path.basename(args.basket))[0]
    out_path = os.path.join(args.out_dir, f"groups_{basket_name}.png")
    plot_groups(csv_path=args.csv, out_path=out_path, title_note=basket_name)

if __name__ == "__main__":
    main()
