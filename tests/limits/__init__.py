"""Tests for gqlguard.limits"""
