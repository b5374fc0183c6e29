import matplotlib.pyplot as plt

def plot_timeseries(df, path_prefix):
    paths = []
    for col in ('population', 'changed'):
        plt.figure(); plt.plot(df['t'], df[col]); plt.xlabel('generation'); plt.ylabel(col)
        p = f"{path_prefix}_{col}.png"
        plt.savefig(p, dpi=150, bbox_inches='tight'); plt.close()
        paths.append(p)
    return paths
