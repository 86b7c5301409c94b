"""
ContinuITy Experimentation
==========================

Building blocks for automated load-testing experiments against a ContinuITy
frontend.

This package provides:
- Data holders for passing values between experiment actions
- REST actions talking to the ContinuITy frontend
- Workload model generation with create-then-wait polling
- A sequential experiment runner and command line entry point
"""

__version__ = "1.0.0"
__author__ = "ContinuITy Experimentation Team"
