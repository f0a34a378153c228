"""
Responsive Layout Inference from Absolutely Positioned Designs

Infers a grid, flow or absolute structure from canvas elements and generates
responsive CSS, a skeleton component tree and utility classes per breakpoint.
"""

__version__ = "0.1.0"
