# main.py
import argparse
import logging
import os
import time
import traceback
from typing import List, Optional

# Import project modules
from session import MazeSession
from visualization import (
    render_ascii,
    render_path,
    visualize_corridor,
    visualize_maze_grid,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate the canyon maze and unicursal corridor for one session."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    parser.add_argument("--output-dir", default="output", help="Directory for plot images")
    parser.add_argument("--no-plots", action="store_true", help="Skip writing plot images")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    return parser.parse_args(argv)


def run_generation(session: MazeSession, args: argparse.Namespace):
    start_time = time.time()

    print("\n--- Perfect Maze (Expanded Grid) ---")
    print(render_ascii(session.grid))
    print(f"\n  Solution ({len(session.solution)} rooms): {render_path(session.solution)}")
    print(f"  Expanded solution: {len(session.expanded_solution)} cells")

    print("\n--- Unicursal Corridor ---")
    print(f"  Path ({len(session.corridor)} cells): {render_path(session.corridor)}")
    print(f"  Collectibles: {render_path(session.collectibles)}")

    if not args.no_plots:
        print("\n--- Generating Visualizations ---")
        os.makedirs(args.output_dir, exist_ok=True)
        try:
            visualize_maze_grid(
                session.grid,
                session.expanded_solution,
                filename=os.path.join(args.output_dir, "maze_solution.png"),
            )
            visualize_corridor(
                session.corridor,
                session.collectibles,
                filename=os.path.join(args.output_dir, "corridor.png"),
            )
        except Exception as e:
            print(f"An error occurred during visualization generation: {e}")
            traceback.print_exc()

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    with MazeSession.from_seed(args.seed) as session:
        run_generation(session, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
