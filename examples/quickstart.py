"""
strsim — Quick-start examples with dummy data.

Run:  python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Flat metric functions  (strsim)
# ──────────────────────────────────────────────────────────────

def example_flat() -> None:
    divider("1 · Flat Metric Functions (strsim)")

    import strsim

    print(f'  hamming("hamming", "hammers")              = {strsim.hamming("hamming", "hammers")}')
    print(f'  levenshtein("kitten", "sitting")           = {strsim.levenshtein("kitten", "sitting")}')
    print(f'  normalized_levenshtein("kitten", "sitting") = {strsim.normalized_levenshtein("kitten", "sitting"):.4f}')
    print(f'  osa_distance("ca", "abc")                  = {strsim.osa_distance("ca", "abc")}')
    print(f'  damerau_levenshtein("ca", "abc")           = {strsim.damerau_levenshtein("ca", "abc")}')
    print(f'  jaro("Friedrich Nietzsche", "Jean-Paul Sartre") = {strsim.jaro("Friedrich Nietzsche", "Jean-Paul Sartre"):.4f}')
    print(f'  jaro_winkler("cheeseburger", "cheese fries")    = {strsim.jaro_winkler("cheeseburger", "cheese fries"):.4f}')

    try:
        strsim.hamming("ham", "hamming")
    except strsim.DifferentLengthArgs as e:
        print(f"\n  hamming on unequal lengths → {e}")


# ──────────────────────────────────────────────────────────────
# 2. Metric modules  (strsim.distance)
# ──────────────────────────────────────────────────────────────

def example_distance() -> None:
    divider("2 · Distance Metrics (strsim.distance)")

    from strsim.distance import (
        OSA,
        DamerauLevenshtein,
        Hamming,
        Jaro,
        JaroWinkler,
        Levenshtein,
        Prefix,
    )
    from strsim.utils import default_process

    s1, s2 = "kitten", "sitting"

    print(f'  Comparing: "{s1}" vs "{s2}"\n')
    print(f"  Levenshtein distance         = {Levenshtein.distance(s1, s2)}")
    print(f"  Levenshtein similarity       = {Levenshtein.similarity(s1, s2)}")
    print(f"  Levenshtein norm. similarity = {Levenshtein.normalized_similarity(s1, s2):.4f}")
    print(f"  OSA distance                 = {OSA.distance(s1, s2)}")
    print(f"  DamerauLevenshtein distance  = {DamerauLevenshtein.distance(s1, s2)}")
    print(f"  Prefix similarity            = {Prefix.similarity(s1, s2)}")
    print(f"  Jaro similarity              = {Jaro.similarity(s1, s2):.4f}")
    print(f"  Jaro-Winkler similarity      = {JaroWinkler.similarity(s1, s2):.4f}")
    print(f"  Jaro-Winkler (weight 0.2)    = {JaroWinkler.similarity(s1, s2, prefix_weight=0.2):.4f}")
    print(f'  Hamming("hello", "jello")    = {Hamming.distance("hello", "jello")}')

    # keyword options shared by every metric
    print(f'\n  Levenshtein("Kitten!", "KITTEN", processor=default_process) = '
          f'{Levenshtein.distance("Kitten!", "KITTEN", processor=default_process)}')
    print(f'  Levenshtein("kitten", "sitting", score_cutoff=2)           = '
          f'{Levenshtein.distance("kitten", "sitting", score_cutoff=2)}')


# ──────────────────────────────────────────────────────────────
# 3. Batch extraction  (strsim.process)
# ──────────────────────────────────────────────────────────────

def example_process() -> None:
    divider("3 · Batch Extraction (strsim.process)")

    from strsim import process
    from strsim.distance import Levenshtein

    products = [
        "Apple iPhone 15 Pro Max",
        "Samsung Galaxy S24 Ultra",
        "Google Pixel 8 Pro",
        "OnePlus 12",
        "Apple iPad Air M2",
        "Apple MacBook Pro M3",
        "Dell XPS 15",
    ]

    query = "aple iphone"

    # Top 3 matches (default scorer = JaroWinkler.similarity)
    print(f'  query: "{query}"')
    print("  --- extract (top 3) ---")
    for match, score, idx in process.extract(query, products, limit=3):
        print(f"    [{idx}] {match:30s}  score={score:.3f}")

    best = process.extractOne(query, products)
    if best:
        match, score, idx = best
        print(f"\n  extractOne → [{idx}] {match}  score={score:.3f}")

    # Distances sort ascending and treat score_cutoff as an upper bound
    print("\n  --- extract with Levenshtein.distance, score_cutoff=15 ---")
    results = process.extract(
        query, products, scorer=Levenshtein.distance, limit=None, score_cutoff=15
    )
    for match, score, idx in results:
        print(f"    [{idx}] {match:30s}  distance={score}")


# ──────────────────────────────────────────────────────────────
# 4. Pairwise score matrix  (process.cdist)
# ──────────────────────────────────────────────────────────────

def example_cdist() -> None:
    divider("4 · Pairwise Score Matrix (process.cdist)")

    from strsim import process

    cities_a = ["New York", "Los Angeles", "Chicago", "Houston"]
    cities_b = ["New Yrok", "LA", "Chigaco", "Housten", "Dallas"]

    try:
        matrix = process.cdist(cities_a, cities_b)
    except ImportError:
        print("  [skipped — numpy not installed]")
        return

    print("  Jaro-Winkler matrix (rows=queries, cols=choices):\n")
    header = "".ljust(16) + "".join(c.center(10) for c in cities_b)
    print(f"  {header}")
    print(f"  {'─' * len(header)}")
    for i, city in enumerate(cities_a):
        row = city.ljust(16) + "".join(f"{matrix[i][j]:.3f}".center(10) for j in range(len(cities_b)))
        print(f"  {row}")


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    example_flat()
    example_distance()
    example_process()
    example_cdist()

    print("\n✅  All examples completed!\n")
