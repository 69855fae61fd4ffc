"""Droplet engine, scheduling and terminal host helpers."""
