import argparse
import sys
from pathlib import Path

# Ensure local repo package is used even if an installed copy is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from life_simulator import ConsoleRenderer, GridBoard, load_board_file


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a few generations of a board.")
    parser.add_argument(
        "--board",
        default="examples/boards/glider.txt",
        help="Path to a board file",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=4,
        help="Number of generations to print",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    board = GridBoard.from_parsed(load_board_file(args.board))
    renderer = ConsoleRenderer()

    for _ in range(args.steps):
        renderer.render(board)
        print("population", board.population)
        board.step()


if __name__ == "__main__":
    main()
