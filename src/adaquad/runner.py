""" Run batches of test integrals configured in a json file.

Used by the script run_integrals.py:
    run_integrals.py config.json [begin [end]]

The config file contains a list of configs, e.g.

    [{"name": "gauss-3d", "integrand": "gaussian", "ndim": 3,
      "params": {"a": [5, 5, 5], "u": [0.3, 0.5, 0.7]},
      "epsrel": 1e-6, "epsabs": 0, "max_subdivisions": 20000},
     {"name": "osc-tol", "integrand": "oscillatory", "ndim": 2,
      "params_vary": {"epsrel": [1e-3, 1e-5, 1e-7]}}]

"integrand" names a member of adaquad.integrands.GENZ_FAMILY, "params" are
passed to its constructor. One dimensional configs are integrated with the
Gauss-Kronrod integrator, all others with Genz-Malik. With "params_vary" the
integration is repeated for every value of the varied settings. Results are
written as json to an 'out' directory next to the config file. Configs are
independent integrations and run in parallel in a process pool.
"""

import sys
import os
import json
from multiprocessing import Pool
from collections import defaultdict
from functools import partial

from .core import GaussKronrodQuad, GenzMalikCubature, NonConvergenceError
from .core.integrands import GENZ_FAMILY

SETTINGS = ('epsrel', 'epsabs', 'max_subdivisions')


def join_dir_safe(path, dir_name):
    new_dir = os.path.join(path, dir_name)
    if not os.path.exists(new_dir):
        os.makedirs(new_dir)
    return new_dir


def make_integrator(ndim, settings):
    if ndim == 1:
        return GaussKronrodQuad(vectorized=True, **settings)
    return GenzMalikCubature(ndim, vectorized=True, **settings)


def run_integral(config, settings=None):
    """ Integrate the configured test function once.

    :return: Dictionary with the estimate, the errors and the effort.
    """
    if settings is None:
        settings = {key: config[key] for key in SETTINGS if key in config}
    ndim = config['ndim']
    fn = GENZ_FAMILY[config['integrand']](ndim, **config.get('params', {}))
    integrator = make_integrator(ndim, settings)

    if ndim == 1:
        # one dimensional test functions still expect points of length 1
        def integrand(xs):
            return fn(xs[:, None])
        a, b = 0., 1.
    else:
        integrand = fn
        a, b = [0.] * ndim, [1.] * ndim

    try:
        result = integrator(integrand, a, b)
    except NonConvergenceError as error:
        print("NOT CONVERGED %s: %s" % (config['name'], error), flush=True)
        result = error.result

    info = {'integral': result.integral,
            'integral_err': result.integral_err,
            'exact': fn.exact,
            'true_err': abs(result.integral - fn.exact),
            'eval_count': result.eval_count,
            'subdivisions': result.subdivisions,
            'converged': result.converged}
    info.update(settings)
    return info


def run(config, out_dir):
    print('START ' + config['name'], flush=True)
    if 'params_vary' in config:
        vary = config['params_vary']
        names = list(vary.keys())
        results = defaultdict(list)
        for values in zip(*vary.values()):
            settings = {key: config[key] for key in SETTINGS if key in config}
            settings.update(zip(names, values))
            info = run_integral(config, settings)
            for key in info:
                results[key].append(info[key])
    else:
        results = run_integral(config)

    with open(os.path.join(out_dir, config['name'] + '.json'), 'w') as out:
        json.dump(results, out, indent=2)
    print('CONFIG %s DONE' % config['name'], flush=True)
    return results


def run_all(configs, out_dir):
    """ Run all configs in a process pool, writing results to out_dir. """
    with Pool() as pool:
        return pool.map(partial(run, out_dir=out_dir), configs)


def main(argv=None):
    if argv is None:
        argv = sys.argv
    config_file = argv[1]
    base = os.path.split(config_file)[0]
    out_dir = join_dir_safe(base, 'out')

    with open(config_file) as in_file:
        configs = json.load(in_file)

    try:
        begin = int(argv[2])
        try:
            end = int(argv[3])
            configs = configs[begin:end]  # run a subset of configs
        except IndexError:
            configs = [configs[begin]]  # run only one config
    except IndexError:
        pass  # run all configs in config file

    run_all(configs, out_dir)
    print("SCRIPT DONE", flush=True)
