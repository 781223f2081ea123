#!/usr/bin/python3

from adaquad import *
from adaquad import integrands
import logging
import numpy as np
import matplotlib.pyplot as plt

logging.basicConfig(level=logging.INFO)

ndim = 2
#ndim = 4

for name, family in integrands.GENZ_FAMILY.items():
    fn = family(ndim, a=np.full(ndim, 5.), u=np.linspace(.3, .7, ndim))
    cubature = GenzMalikCubature(ndim, epsrel=1e-6, vectorized=True,
                                 log_every=500)
    try:
        result = cubature(fn, np.zeros(ndim), np.ones(ndim))
    except NonConvergenceError as error:
        print(error)
        result = error.result
    print("%-14s %.10f (exact %.10f), %d regions, %d evaluations" % (
        name, result.integral, fn.exact, len(result.regions),
        result.eval_count))

if ndim == 2:
    fn = integrands.ProductPeak(ndim, a=[20, 20], u=[.3, .6])
    GenzMalikCubature(ndim, epsrel=1e-6)(fn, [0, 0], [1, 1]).plot()
    plt.show()
