"""
Fit a weighted line to a small data set and print it.

    python examples/weighted.py
"""

from pywls import WLS

x_points = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
y_points = [1.0, 3.0, 4.0, 5.0, 2.0, 3.0, 4.0]
weights = [10.0, 1.0, 3.0, 8.0, 14.0, 21.0, 13.0]

line = WLS(x_points, y_points, weights).fit_linear_regression()
if line is None:
    print("No unique line fits the data")
else:
    print(f"Slope: {line.get_slope()}")
    print(f"Intercept: {line.get_intercept()}")
