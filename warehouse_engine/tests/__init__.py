"""Test suite for the warehouse analytics engine"""
