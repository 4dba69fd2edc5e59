
def step_schedule_factory(initial=0.0, final=1.0, t_step=10):
    def schedule(t):
        if t < t_step: return initial
        return final
    return schedule

def disturbance_schedule_factory(magnitude=0.0, start=None, stop=None):
    def schedule(t):
        if start is None or t < start: return 0.0
        if stop is not None and t >= stop: return 0.0
        return magnitude
    return schedule
