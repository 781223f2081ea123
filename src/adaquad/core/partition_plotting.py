import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.patches import Rectangle


def plot1d(result):
    """ Bars of the local average integrand and the local errors. """
    fig = plt.figure(figsize=(14, 7))
    # Genz-Malik regions in one dimension carry arrays of length 1
    regions = sorted(result.regions, key=lambda r: np.min(r.lo))
    lows = np.ravel([r.lo for r in regions])
    widths = np.ravel([r.hi - r.lo for r in regions])

    ax1 = plt.subplot2grid((3, 1), (0, 0), rowspan=2)
    ax1.set_title('mean value per interval')
    ax1.bar(lows, [r.integral for r in regions] / widths, widths,
            align='edge', alpha=.4, edgecolor='k')
    ax1.grid(True)

    ax2 = plt.subplot2grid((3, 1), (2, 0), sharex=ax1)
    ax2.set_title('local error')
    ax2.bar(lows, [r.error for r in regions], widths, align='edge',
            alpha=.4, edgecolor='k')
    ax2.set_yscale('log')

    fig.tight_layout()
    return fig


def plot2d(result):
    """ Final partition, rectangles colored by log10 of the local error. """
    fig = plt.figure(figsize=(8, 7))
    ax = fig.gca()
    ax.set_title('%d regions, %d evaluations' % (len(result.regions),
                                                  result.eval_count))

    rects = [Rectangle(r.lo, *(r.hi - r.lo)) for r in result.regions]
    errors = np.array([r.error for r in result.regions])
    collection = PatchCollection(rects, edgecolor='k', linewidth=.3)
    collection.set_array(np.log10(np.maximum(errors, np.finfo(float).tiny)))
    ax.add_collection(collection)
    plt.colorbar(collection, ax=ax, label='log10(error)')

    lows = np.min([r.lo for r in result.regions], axis=0)
    highs = np.max([r.hi for r in result.regions], axis=0)
    ax.set_xlim(lows[0], highs[0])
    ax.set_ylim(lows[1], highs[1])
    ax.set_aspect('equal')

    fig.tight_layout()
    return fig
