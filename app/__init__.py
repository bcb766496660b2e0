"""
                Restaurant Table Orders

An in-memory, high-concurrency backend for restaurant table orders
with a REST API, a console client and a load simulation driver.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"
