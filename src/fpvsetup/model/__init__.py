"""
The MODEL layer contains pure data structures and the calculation logic.
It has NO knowledge of any front end (CLI or GUI).
It deals with Geometry, Units and the FOV trigonometry.
"""
