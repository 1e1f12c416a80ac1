"""Servicios del Core: la lógica detrás de cada comando."""
