SALINITY_UNITS = ("PSU", "ppt", "mg/L")

# Salinity conversion (PSU, ppt or mg/L → PSU)
def salinity_to_psu(value, unit):
    """Convert a salinity input to practical salinity units."""
    if unit in ("PSU", "ppt"):
        # 1 PSU ≈ 1 g/kg = 1 ppt
        return value
    if unit == "mg/L":
        # 1 g/L ≈ 1000 mg/L ≈ 1 PSU
        return value / 1000.0
    raise ValueError(f"Unknown salinity unit '{unit}'. Expected one of: {', '.join(SALINITY_UNITS)}")
