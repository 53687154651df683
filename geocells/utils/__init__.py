"""Shared utilities for geocells"""
