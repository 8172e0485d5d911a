"""Agency dashboard core - table index, repositories and KPI services."""
