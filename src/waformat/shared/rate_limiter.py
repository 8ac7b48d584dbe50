"""
Rate Limiter - Abuse Prevention

This module implements a sliding-window rate limiter so a single chat cannot
flood the bot with edits, quick-format taps or copy requests. Exceeding a
limit blocks the identifier for a cool-down period.

Files that USE this module:
- waformat.adapters.telegram.handlers (checks every message and button tap)

Files that this module USES:
- None (pure utility implementation)
"""
import time
from typing import Dict, Optional
from collections import defaultdict, deque
from dataclasses import dataclass


@dataclass
class RateLimitConfig:
    """Configuration for rate limiting."""
    max_requests: int
    time_window: int  # in seconds
    block_duration: int = 60


class RateLimiter:
    """Simple in-memory rate limiter."""
    
    def __init__(self):
        self._requests: Dict[str, deque] = defaultdict(deque)
        self._blocked: Dict[str, float] = {}
    
    def _prune(self, identifier: str, config: RateLimitConfig, now: float) -> deque:
        cutoff = now - config.time_window
        requests = self._requests[identifier]
        while requests and requests[0] < cutoff:
            requests.popleft()
        return requests
    
    def is_allowed(self, identifier: str, config: RateLimitConfig) -> bool:
        """
        Check if a request is allowed for the given identifier.
        
        Args:
            identifier: Unique identifier (e.g., "message:user:123")
            config: Rate limit configuration
            
        Returns:
            True if request is allowed, False if rate limited
        """
        now = time.time()
        
        # Check if currently blocked
        if identifier in self._blocked:
            if now < self._blocked[identifier]:
                return False
            del self._blocked[identifier]
        
        requests = self._prune(identifier, config, now)
        
        if len(requests) >= config.max_requests:
            self._blocked[identifier] = now + config.block_duration
            return False
        
        requests.append(now)
        return True
    
    def get_remaining_requests(self, identifier: str, config: RateLimitConfig) -> int:
        """Get remaining requests available for an identifier within the time window."""
        requests = self._prune(identifier, config, time.time())
        return max(0, config.max_requests - len(requests))
    
    def get_reset_time(self, identifier: str, config: RateLimitConfig) -> Optional[float]:
        """
        Get when the rate limit window resets for an identifier.
        
        Returns:
            Unix timestamp when rate limit resets, or None if not currently limited
        """
        if identifier in self._blocked:
            return self._blocked[identifier]
        
        requests = self._requests[identifier]
        if not requests:
            return None
        return requests[0] + config.time_window


# Global rate limiter instance
rate_limiter = RateLimiter()

# Predefined rate limit configurations
RATE_LIMITS = {
    "user_message": RateLimitConfig(max_requests=30, time_window=60),  # typed edits
    "button_tap": RateLimitConfig(max_requests=60, time_window=60),    # quick-format, examples, language
    "copy_request": RateLimitConfig(max_requests=10, time_window=60),  # each copy sends a message
}
