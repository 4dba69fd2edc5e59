
import matplotlib.pyplot as plt
def plot_timeseries(df, path_prefix):
    plt.figure(); plt.plot(df['t'], df['target'], '--', label='target'); plt.plot(df['t'], df['measurement'], label='measurement')
    plt.xlabel('t'); plt.ylabel('value'); plt.legend()
    plt.savefig(path_prefix+'_tracking.png', dpi=150, bbox_inches='tight'); plt.close()
    plt.figure(); plt.plot(df['t'], df['u_cmd'], label='u_cmd'); plt.plot(df['t'], df['u_eff'], label='u_eff')
    plt.xlabel('t'); plt.ylabel('output'); plt.legend()
    plt.savefig(path_prefix+'_output.png', dpi=150, bbox_inches='tight'); plt.close()
    plt.figure()
    for term in ('p', 'i', 'd'): plt.plot(df['t'], df[term], label=term)
    plt.xlabel('t'); plt.ylabel('term'); plt.legend()
    plt.savefig(path_prefix+'_terms.png', dpi=150, bbox_inches='tight'); plt.close()
