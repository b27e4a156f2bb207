"""Pricing domain - price records and the resolution rule"""
