"""
AI Client Manager

This module manages separate AI client instances for different services to prevent
API contention. Question generation and interview analysis each get their own
dedicated client instance against the OpenAI-compatible NVIDIA endpoint.
"""

import os
from openai import AsyncOpenAI
import logging
import threading
from typing import Dict, Optional
from dotenv import load_dotenv

# Ensure .env is loaded
load_dotenv()

logger = logging.getLogger(__name__)

SERVICE_TYPES = ("question_generation", "response_analysis")

class AIClientManager:
    """
    Manages dedicated AI client instances for different services.
    
    Clients are created lazily on first access so that importing the
    application never requires credentials.
    """
    
    _lock = threading.Lock()
    
    def __init__(self):
        self._clients: Dict[str, AsyncOpenAI] = {}
        self._initialized = False
    
    def _initialize_clients(self):
        """Lazy initialization of client instances."""
        if self._initialized:
            return
            
        with self._lock:
            # Double-check locking for initialization
            if self._initialized:
                return
                
            api_key = os.getenv("NVIDIA_API_KEY")
            if not api_key:
                raise RuntimeError(
                    "NVIDIA_API_KEY environment variable is not set. "
                    "Please set it in your .env file or environment variables."
                )
            
            base_url = os.getenv("NVIDIA_BASE_URL", "https://integrate.api.nvidia.com/v1")
            
            try:
                self._clients = {
                    service_type: AsyncOpenAI(base_url=base_url, api_key=api_key)
                    for service_type in SERVICE_TYPES
                }
                
                self._initialized = True
                logger.info(f"Initialized {len(self._clients)} dedicated AI client instances")
                
            except Exception as e:
                logger.error(f"Failed to initialize AI clients: {e}")
                raise RuntimeError(f"Failed to initialize AI clients: {e}") from e
    
    def get_client(self, service_type: str) -> AsyncOpenAI:
        """
        Get a dedicated client for the specified service type.
        
        Args:
            service_type (str): Type of service ("question_generation", "response_analysis")
                              
        Returns:
            AsyncOpenAI: Dedicated client instance for the service
            
        Raises:
            ValueError: If service_type is not supported
            RuntimeError: If clients failed to initialize
        """
        if service_type not in SERVICE_TYPES:
            raise ValueError(f"Unsupported service type: {service_type}. Available: {list(SERVICE_TYPES)}")

        self._initialize_clients()
        
        if not self._initialized:
            raise RuntimeError("AI clients failed to initialize properly")
        
        return self._clients[service_type]

# Lazy initialization - no eager instantiation
_ai_manager: Optional[AIClientManager] = None
_manager_lock = threading.Lock()

def get_ai_client_manager() -> AIClientManager:
    """
    Get the singleton AIClientManager instance with lazy initialization.
    
    Returns:
        AIClientManager: The singleton instance
    """
    global _ai_manager
    
    if _ai_manager is None:
        with _manager_lock:
            # Double-check locking pattern
            if _ai_manager is None:
                _ai_manager = AIClientManager()
    
    return _ai_manager
