"""Blogdash Backend: users, categories and blogs of a blogging dashboard."""
