#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m slider.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --include_unsolvable --out results/p8.csv")
    run("python -m slider.experiments.runner --n 4 --depths 6 10 14 --per_depth 5 --out results/p15.csv")
    run("python -m slider.experiments.summarize results/p8.csv results/p15.csv --save results/summary.csv")

if __name__ == "__main__":
    main()
