import argparse
import subprocess
import sys
from pathlib import Path

from engine.defaults import DEFAULT_STRATEGY

# ============================================================
# Paths
# ============================================================

ROOT = Path(__file__).resolve().parent

CONFIG_DIR = ROOT / "inputs" / "config"
OUTPUTS_DIR = ROOT / "outputs"


# ============================================================
# CLI
# ============================================================

def parse_args():
    parser = argparse.ArgumentParser(
        description="Basket split pipeline: catalog CSV → catalog JSON → split"
    )

    parser.add_argument(
        "--catalog-csv",
        type=str,
        required=True,
        help="Path to item/method CSV (e.g. inputs/catalog.csv)",
    )

    parser.add_argument(
        "--basket",
        type=str,
        required=True,
        help="Path to basket JSON (list of item ids)",
    )

    parser.add_argument(
        "--strategy",
        type=str,
        default=DEFAULT_STRATEGY,
        help="Search strategy passed to run_split.py",
    )

    parser.add_argument(
        "--max-methods",
        type=int,
        default=None,
        help="Cap on distinct candidate methods passed to run_split.py",
    )

    parser.add_argument(
        "--outdir",
        type=str,
        default=str(OUTPUTS_DIR),
        help="Directory to write split outputs",
    )

    return parser.parse_args()


def split_command(catalog, basket, outdir, strategy=DEFAULT_STRATEGY, max_methods=None):
    cmd = [
        sys.executable,
        "-m",
        "scripts.run_split",
        "--config",
        str(catalog),
        "--basket",
        str(basket),
        "--strategy",
        strategy,
        "--outdir",
        str(outdir),
    ]
    if max_methods is not None:
        cmd += ["--max-methods", str(max_methods)]
    return cmd


def run_step(cmd, failure):
    try:
        subprocess.run(cmd, cwd=str(ROOT), check=True)
    except subprocess.CalledProcessError:
        print(f"[ERROR] {failure}")
        sys.exit(1)


# ============================================================
# Main orchestration
# ============================================================

def main():
    args = parse_args()

    catalog_csv = Path(args.catalog_csv).resolve()
    basket = Path(args.basket).resolve()
    outdir = Path(args.outdir).resolve()

    for path, what in ((catalog_csv, "Catalog CSV"), (basket, "Basket file")):
        if not path.exists():
            print(f"[ERROR] {what} not found: {path}")
            sys.exit(1)

    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    outdir.mkdir(parents=True, exist_ok=True)

    generated_catalog = CONFIG_DIR / "generated_from_csv.json"

    # ============================================================
    # STEP 1: Build catalog JSON from CSV
    # ============================================================

    print("=" * 70)
    print("[STEP 1] Building catalog JSON from CSV")
    print("=" * 70)

    run_step(
        [
            sys.executable,
            "-m",
            "inputs.scripts.build_catalog_from_csv",
            "--csv",
            str(catalog_csv),
            "--out",
            str(generated_catalog),
        ],
        "Failed while building catalog from CSV",
    )

    if not generated_catalog.exists():
        print("[ERROR] Catalog file was not generated:")
        print(generated_catalog)
        sys.exit(1)

    print("[OK] Generated catalog:", generated_catalog)

    # ============================================================
    # STEP 2: Split the basket
    # ============================================================

    print("=" * 70)
    print("[STEP 2] Splitting basket")
    print("=" * 70)

    run_step(
        split_command(generated_catalog, basket, outdir, args.strategy, args.max_methods),
        "Basket split failed",
    )

    print("=" * 70)
    print("[SUCCESS] Full pipeline completed")
    print("Outputs written to:", outdir)
    print("=" * 70)


# ============================================================
# Entry point
# ============================================================

if __name__ == "__main__":
    main()
