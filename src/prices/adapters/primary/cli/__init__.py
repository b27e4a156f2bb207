"""Command line adapter"""
