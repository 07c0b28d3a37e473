import pandas as pd

from crops.errors import InvalidQuantity


def _clean_names(s: pd.Series) -> pd.Series:
    return s.astype("string").str.strip().str.lower()


def validate_crops(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["name"] = _clean_names(df["name"])
    df = df[df["name"].notna() & (df["name"] != "")]
    for c in ("yield", "cost", "sale_price"):
        df[c] = pd.to_numeric(df[c], errors="coerce")
    dupes = df.loc[df["name"].duplicated(), "name"].tolist()
    if dupes:
        raise ValueError(f"Crops CSV lists the same crop more than once: {sorted(set(dupes))}")
    return df.reset_index(drop=True)


def validate_factors(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for c in ("crop", "factor", "level"):
        df[c] = _clean_names(df[c])
    df["percent"] = pd.to_numeric(df["percent"], errors="coerce")
    df = df.dropna(subset=["crop", "factor", "level", "percent"])
    return df.reset_index(drop=True)


def validate_orders(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["crop"] = _clean_names(df["crop"])
    quantity = pd.to_numeric(df["quantity"], errors="coerce")
    bad = df.loc[df["crop"].notna() & quantity.isna() & df["quantity"].notna(), "crop"]
    if not bad.empty:
        raise ValueError(f"Orders CSV has unreadable quantities for: {sorted(bad.astype(str))}")
    df["quantity"] = quantity
    df = df.dropna(subset=["crop", "quantity"])
    negative = df[df["quantity"] < 0]
    if not negative.empty:
        raise InvalidQuantity(float(negative["quantity"].iloc[0]))
    return df.reset_index(drop=True)
