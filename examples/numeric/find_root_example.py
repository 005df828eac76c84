#!usr/bin/env python3

# Example comparing bisection and Newton's method on the built-in
# sample functions.
# Written October 2026.

import matplotlib.pyplot as plt

from rootcompare.numeric import SAMPLE_FUNCTIONS
from rootcompare.numeric.solve import (find_root, IterationLimit,
                                       ResidualThreshold, SameSignError)

# Search interval for each sample function.  The default polynomial is
# positive everywhere, so it shows the same-sign failure.
brackets = {'polynomial': (-1.0, 1.0),
            'trigonometric': (-1.0, 1.5),
            'exponential': (0.0, 1.0),
            'mixed': (-1.0, 0.0)}

stop_options = [IterationLimit(10), ResidualThreshold(1e-8)]

# ----------------------------------------------------------------------

for name, (x_a, x_b) in brackets.items():
    f, df_dx = SAMPLE_FUNCTIONS[name]
    res = None

    for stop in stop_options:
        print(f"\nFunction: {name}, interval [{x_a}, {x_b}], {stop}:")
        try:
            res = find_root(f, x_a, x_b, stop, fprime=df_dx)
        except SameSignError as e:
            print(f"\t{e.args[0]}")
            continue

        print(res.summary())

    if res is None:
        continue

    # Plot the curve and estimates from the final run.
    plt.figure()
    plt.plot(res.curve[:, 0], res.curve[:, 1], '-b', label="f(x)")
    plt.plot(res.bisection.x, res.bisection.y, 'o', markersize=8,
             label="BISECTION")
    plt.plot(res.newton.x, res.newton.y, 's', markersize=8,
             label="NEWTON")
    plt.axvline(x_a, color='k', linestyle='--')
    plt.axvline(x_b, color='k', linestyle='--')
    plt.grid(axis='both')
    plt.legend()
    plt.xlabel("$x$")
    plt.ylabel("$f(x)$")
    plt.title(f"ROOT COMPARISON - {name}")
    plt.show(block=False)

plt.show(block=True)
