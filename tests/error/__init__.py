"""Tests for gqlguard.error"""
