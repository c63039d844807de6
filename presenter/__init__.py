"""
Webpage Presenter

Turns a webpage into a shareable slide presentation: the page is scraped,
its content extracted and planned into typed slides, and the slides are
built on the presentation service.
"""

__version__ = "0.1.0"
