"""Bounded contexts of vitae: intake (reading résumés) and rendering (writing them)."""
