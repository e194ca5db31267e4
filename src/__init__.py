"""Daisyworld: an energy-balance model of albedo feedback between daisies and climate."""
