"""Pure calculators: acquisition costs, AfA, loan phases, KPIs."""
