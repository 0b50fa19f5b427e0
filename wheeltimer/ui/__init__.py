"""Tkinter front end for the countdown."""
