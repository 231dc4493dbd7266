# SPDX-License-Identifier: MIT
"""Interface modules describing collaborators of the configuration layer.

Import the specific interface modules (e.g. ``lintcore.interfaces.engine``)
directly instead of relying on re-exports.
"""

__all__: tuple[str, ...] = ()
