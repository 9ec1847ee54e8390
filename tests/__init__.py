"""Tests for gqlguard"""
