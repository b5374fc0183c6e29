import numpy as np, pandas as pd

REQUIRED = ['t','population','births','deaths','changed','extinct']

def _first(df, mask):
    hits = df.loc[mask, 't']
    return int(hits.iloc[0]) if len(hits) else None

def metrics_from_log(log):
    df = pd.DataFrame(log)
    missing = [c for c in REQUIRED if c not in df.columns]
    if missing:
        raise ValueError(f"run log is missing columns: {missing}")
    if df.empty:
        return {'generations':0,'final_population':0,'peak_population':0,'mean_population':0.0,
                'total_births':0,'total_deaths':0,'extinct_at':None,'stable_at':None}, df
    pop = df['population']
    return {
        'generations': int(len(df)),
        'final_population': int(pop.iloc[-1]),
        'peak_population': int(pop.max()),
        'mean_population': float(np.mean(pop)),
        'total_births': int(df['births'].sum()),
        'total_deaths': int(df['deaths'].sum()),
        'extinct_at': _first(df, df['extinct'].astype(bool)),
        'stable_at': _first(df, df['changed'] == 0),
    }, df
