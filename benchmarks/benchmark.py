import random
from pyinstrument import Profiler
from ordered_insert import OrdList, insert_in_order

def random_values(n, seed=1):
    rng = random.Random(seed)
    return [rng.uniform(-1000.0, 1000.0) for _ in range(n)]

def benchmark_large():
    values = random_values(20_000)
    print(f"Generated {len(values)} values")

    profiler = Profiler()
    profiler.start()

    N = 10
    print(f"Starting insertion ({N} iterations)...")
    for _ in range(N):
        asc = []
        for v in values:
            insert_in_order(asc, v)
        desc = OrdList(direction="descending")
        desc.extend_in_order(values)
    print("Insertion finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("ordered_insert_profile.html", "w") as f:
        f.write(profiler.output_html())

if __name__ == "__main__":
    benchmark_large()
