#!/usr/bin/python3

from adaquad import *
import numpy as np
import matplotlib.pyplot as plt
from timeit import default_timer as timer


def peak(x):
    return 1 / ((x - .3)**2 + 1e-4)


exact = 100 * (np.arctan(70) + np.arctan(30))

t_start = timer()
for epsrel in (1e-3, 1e-6, 1e-9, 1e-12):
    est, err, count = integrate(peak, 0, 1, epsrel=epsrel)
    print("epsrel %g: %.15g +- %.3g (true error %.3g), %d evaluations" %
          (epsrel, est, err, abs(est - exact), count))
t_end = timer()
print("time: ", t_end - t_start)

# tail to infinity
result = integrate(lambda x: np.exp(-x) / x**2, 1, np.inf, sub='inverse')
print(result)

# sampled data
xs = np.linspace(0, 1, 1000)
print("discrete:", discrete_integrate(peak(xs), xs[1] - xs[0]))

quad = GaussKronrodQuad(epsrel=1e-8, vectorized=True)
result = quad(peak, 0, 1)
result.plot()
plt.show()
