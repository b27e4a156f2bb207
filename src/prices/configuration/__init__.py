"""Configuration and dependency wiring"""
