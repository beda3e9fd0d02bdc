"""Outbound adapters: smart-lock vendors and webhook transport."""
