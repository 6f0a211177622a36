"""Recipe domain.

Recipe aggregate plus the ingredient scaling engine used to display a
recipe for a different number of servings.
"""
