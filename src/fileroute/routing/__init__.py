"""Routing — filesystem-derived route table with first-match dispatch.

Templates are compiled and ordered once when the router is built; the
resulting table is immutable.
"""
