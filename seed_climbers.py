# seed_climbers.py
import csv
import os
import sys

from scoreboard.config import Config


def main(num_climbers=50, path=None):
    path = path or Config.CLIMBERS_PATH

    existing = 0
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8", newline="") as f:
            existing = sum(1 for row in csv.reader(f) if row and row[0].strip())
    print(f"Existing climbers: {existing}")

    with open(path, "a", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        for i in range(num_climbers):
            writer.writerow([f"Test Climber {existing + i + 1}"])

    print(f"Now have {existing + num_climbers} climbers in {path}.")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 50)
