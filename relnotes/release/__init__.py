"""Release domain: window resolution, commit classification, rendering.

Everything in this package is pure: no I/O, no environment access.
"""

from __future__ import annotations
