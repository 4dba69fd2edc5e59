
import numpy as np, pandas as pd
def metrics_from_log(log, band=0.02, dt=1.0, i_min=-np.inf, i_max=np.inf):
    """
    Step-response metrics from a closed-loop log (dict of lists or DataFrame).
    Overshoot is relative to the step size; settling_time is the first t after
    which |error| stays within band*|step| (last t if it never settles).
    """
    df = pd.DataFrame(log)
    df['error'] = df['target'] - df['y']
    final, initial = float(df['target'].iloc[-1]), float(df['target'].iloc[0])
    step = final - initial
    if step != 0:
        excursion = (df['y'] - final) * np.sign(step)
        overshoot = float(max(0.0, excursion.max()) / abs(step))
        tol = band * abs(step)
    else:
        overshoot = 0.0
        tol = band
    outside = np.abs(df['error'].to_numpy()) > tol
    if outside[-1]:
        settling_time = float(df['t'].iloc[-1])
    elif outside.any():
        settling_time = float(df['t'].iloc[int(np.nonzero(outside)[0][-1]) + 1])
    else:
        settling_time = float(df['t'].iloc[0])
    tail = max(1, len(df) // 10)
    sse = float(np.mean(np.abs(df['error'].iloc[-tail:])))
    effort = float(np.sum(np.abs(df['u_eff'])))
    on_limit = np.isclose(df['i'], i_max) | np.isclose(df['i'], i_min)
    i_sat = float(np.mean(on_limit))
    iae = float(np.sum(np.abs(df['error'])) * dt)
    act_sat = float(np.mean(df['saturated'])) if 'saturated' in df else 0.0
    return {'overshoot':overshoot,'settling_time':settling_time,'steady_state_error':sse,
            'control_effort':effort,'integral_saturation':i_sat,
            'actuator_saturation':act_sat,'iae':iae}, df
