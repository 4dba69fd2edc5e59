import matplotlib
matplotlib.use('Agg')

import pytest

from pidloop.analysis.metrics import metrics_from_log
from pidloop.analysis.plots import plot_timeseries


def make_log(y, target, i=None):
    n = len(y)
    return {
        't': list(range(n)), 'target': target, 'y': y, 'measurement': y,
        'u_cmd': [0.5] * n, 'u_eff': [0.5] * n,
        'p': [0.0] * n, 'i': i if i is not None else [0.0] * n, 'd': [0.0] * n,
        'sum_error': [0.0] * n, 'saturated': [False] * n,
    }


def test_step_response_metrics():
    target = [0.0, 1, 1, 1, 1, 1, 1, 1, 1, 1]
    y = [0.0, 0.0, 0.5, 1.2, 1.05, 1.0, 1.0, 1.0, 1.0, 1.0]
    m, df = metrics_from_log(make_log(y, target))
    assert m['overshoot'] == pytest.approx(0.2)
    assert m['settling_time'] == 5.0
    assert m['steady_state_error'] == pytest.approx(0.0)
    assert m['iae'] == pytest.approx(1.75)
    assert m['control_effort'] == pytest.approx(5.0)
    assert 'error' in df.columns


def test_never_settles_reports_last_tick():
    m, _ = metrics_from_log(make_log([0.0] * 6, [1.0] * 6), dt=0.5)
    assert m['overshoot'] == 0.0
    assert m['settling_time'] == 5.0
    assert m['steady_state_error'] == pytest.approx(1.0)
    assert m['iae'] == pytest.approx(3.0)


def test_integral_saturation_fraction():
    log = make_log([0.0] * 4, [1.0] * 4, i=[0.2, 0.5, 0.5, -0.5])
    m, _ = metrics_from_log(log, i_min=-0.5, i_max=0.5)
    assert m['integral_saturation'] == pytest.approx(0.75)
    m, _ = metrics_from_log(log)
    assert m['integral_saturation'] == 0.0


def test_plot_timeseries_writes_pngs(tmp_path):
    m, df = metrics_from_log(make_log([0.0, 0.4, 0.8, 1.0], [1.0] * 4))
    plot_timeseries(df, str(tmp_path / 'run'))
    for suffix in ('tracking', 'output', 'terms'):
        assert (tmp_path / f'run_{suffix}.png').exists()


def test_actuator_saturation_fraction():
    log = make_log([0.0] * 5, [1.0] * 5)
    log['saturated'] = [True, True, False, False, False]
    m, _ = metrics_from_log(log)
    assert m['actuator_saturation'] == pytest.approx(0.4)
    del log['saturated']
    m, _ = metrics_from_log(log)
    assert m['actuator_saturation'] == 0.0
