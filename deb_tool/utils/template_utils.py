"""Template processing utilities"""

import string
from datetime import datetime
from typing import Dict, Any, Optional


def render_template(template: str,
                    variables: Dict[str, Any],
                    now: Optional[datetime] = None,
                    safe: bool = False) -> str:
    """
    Render template with variables

    Args:
        template: Template string
        variables: Variables to substitute
        now: Time used for the date variables (current time if None)
        safe: Use safe substitution (ignore missing vars)

    Returns:
        Rendered string
    """
    now = now or datetime.now()

    # Add common variables
    context = {
        'DATE': now.strftime('%Y-%m-%d'),
        'YEAR': str(now.year),
    }

    # Override with provided variables
    context.update(variables)

    tmpl = string.Template(template)

    if safe:
        return tmpl.safe_substitute(context)
    else:
        return tmpl.substitute(context)
