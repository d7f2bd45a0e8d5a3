"""Pure progression and scoring rules."""
