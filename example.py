#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GenerationEngine, PatternLibrary


def main():
    """Demonstrate headless use of the generation engine."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        # Start the glider near the top-left of a 12x12 grid
        engine = GenerationEngine(12, 12, glider.offset(1, 1).cells)

        print("Initial state:")
        print(engine.grid)
        print(f"Population: {engine.population}")
        print()

        for _ in range(10):
            engine.advance()
            print(f"Generation {engine.generation}:")
            print(engine.grid)
            print(f"Population: {engine.population}")
            print()


if __name__ == "__main__":
    main()
