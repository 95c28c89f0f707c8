# -*- coding: utf-8 -*-
"""
Error message helpers for client-facing responses
"""

import re

GENERIC_ERROR_MESSAGE = "Server error"


def sanitize_error_message(error: Exception) -> str:
    """
    Strip technical details from an exception before it reaches a client.

    Filesystem paths, credentials and tracebacks never leave the process;
    anything that looks sensitive collapses to the generic message.
    
    Args:
        error: the exception being reported
        
    Returns:
        A short, client-safe message
    """
    error_str = str(error)
    lowered = error_str.lower()
    
    sensitive_keywords = [
        'api key', 'api_key', 'authorization', 'bearer', 'token',
        'traceback', 'file "/', 'password'
    ]
    
    for keyword in sensitive_keywords:
        if keyword in lowered:
            return GENERIC_ERROR_MESSAGE
    
    error_str = re.sub(r'[A-Za-z]:\\[^\s]+', '[PATH]', error_str)
    error_str = re.sub(r'/[^\s]+/[^\s]+', '[PATH]', error_str)
    
    if not error_str.strip():
        return GENERIC_ERROR_MESSAGE
    
    if len(error_str) > 200:
        error_str = error_str[:197] + "..."
    
    return error_str
