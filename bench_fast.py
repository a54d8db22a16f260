import time

import strsim

PHILOSOPHERS = ("Philosopher Friedrich Nietzsche", "Philosopher Jean-Paul Sartre")
DNA = ("ACAAGATGCCATTGTCCCCCGGCCTCCTGCTGCTGCTGCTCTCCGGGGCCACGGCCACCGCTGCCCTGCCCCTGGAGGGTGGCCCCACCGGCCGAGACAGCGAGCATATGCAGGAAGCGGCAGGAATAAGGAAAAGCAGCCTCCTGACTTTCCTCGCTTGGTGGTTTGAGTGGACCTCCCAGGCCAGTGCCGGGCCCCTCATAGGAGAGGAAGCTCGGGAGGTGGCCAGGCGGCAGGAAGGCGCACCCCCCCAGCAATCCGCGCGCCGGGACAGAATGCCCTGCAGGAACTTCTTCTGGAAGACCTTCTCCTCCTGCAAATAAAACCTCACCCATGAATGCTCACGCAAGTTTAATTACAGACCTGAA",
       "ACAAGATGCCATTGTCCCCCGGCCTCCTGCTGCTGCTGCTCTCCGGGGCCACGGCCACCGCTGCCCTGCCCCTGGAGGGTGGCCCCACCGGCCGAGACAGCGAGCATATGCAGGAAGCGGCAGGAATAAGGAAAAGCAGCCTCCTGACTTTCCTCGCTTGGTGGTTTGAGTGGACCTCCCAGGCCAGTGCCGGGCCCCTCATAGGAGAGGAAGCTCGGGAGGTGGCCAGGCGGCAGGAAGGCGCACCCCCCCAGCAATCCGCGCGCCGGGACAGAATGCCCTGCAGGAACTTCTTCTGGAAGACCTTCTCCTCCTGCAAATAAAACCTCACCCATGAATGCTCACGCAAGTTTAATTACAGACCTGAA"[::-1])

FUNCTIONS = [
    ("hamming", strsim.hamming, DNA),
    ("jaro", strsim.jaro, PHILOSOPHERS),
    ("jaro_winkler", strsim.jaro_winkler, PHILOSOPHERS),
    ("levenshtein", strsim.levenshtein, PHILOSOPHERS),
    ("normalized_levenshtein", strsim.normalized_levenshtein, PHILOSOPHERS),
    ("osa_distance", strsim.osa_distance, PHILOSOPHERS),
    ("damerau_levenshtein", strsim.damerau_levenshtein, PHILOSOPHERS),
    ("normalized_damerau_levenshtein", strsim.normalized_damerau_levenshtein, PHILOSOPHERS),
]


def timeit_ns(func, *args, repeat=1_000):
    t0 = time.perf_counter_ns()
    for _ in range(repeat):
        res = func(*args)
    t1 = time.perf_counter_ns()
    return res, (t1 - t0) / repeat


for name, func, (s1, s2) in FUNCTIONS:
    res, ns = timeit_ns(func, s1, s2)
    print(f"{name:<32} {ns / 1_000:>10.2f}µs  -> {res}")
