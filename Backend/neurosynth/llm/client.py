# -*- coding: utf-8 -*-
"""
Chat-completion client

- One request per call, no retries
- Transport default timeout unless LLM_TIMEOUT is configured
- Every failure collapses to a one-line fallback string
"""

import aiohttp, asyncio
from typing import List, Dict, Optional, Any

from ..config import LLMConfig
from ..utils.logger import get_logger
from .prompts import FALLBACK_NARRATIVE, RATE_LIMITED_NARRATIVE

logger = get_logger("LLMClient")

class LLMClient:
    """
    Async client for an OpenAI-compatible /chat/completions endpoint
    """
    
    def __init__(self, config: LLMConfig):
        """
        Args:
            config: LLM section of the NeuroSynth config
        """
        self.config = config
        self.url = self._build_url(config.api_url)
        self.headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json"
        }
        self.model = config.model
        self.max_tokens = config.max_tokens
        self.timeout = config.timeout
        
        logger.info(f"✅ LLM client ready: model={self.model}, timeout={self.timeout or 'default'}")
        
    def _build_url(self, base_url: str) -> str:
        """
        Full completions endpoint for a base URL
        
        Args:
            base_url: e.g. https://api.openai.com/v1
            
        Returns:
            the /chat/completions URL
        """
        base = base_url.rstrip("/")
        
        if base.endswith("/chat/completions"):
            return base
        
        return f"{base}/chat/completions"
    
    def _request_kwargs(self) -> Dict[str, Any]:
        if self.timeout is None:
            return {}
        return {"timeout": aiohttp.ClientTimeout(total=self.timeout)}
    
    async def chat_complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: Optional[float] = None
    ) -> str:
        """
        Run one chat completion
        
        Args:
            system_prompt: fixed instruction
            user_prompt: record context
            temperature: overrides the configured temperature
            
        Returns:
            the trimmed message content, or a fallback string on any failure
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt}
            ],
            "temperature": temperature if temperature is not None else self.config.temperature
        }
        if self.max_tokens:
            payload["max_tokens"] = self.max_tokens
        
        logger.debug(f"📤 LLM request: model={self.model}")
        
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.url,
                    headers=self.headers,
                    json=payload,
                    **self._request_kwargs()
                ) as response:
                    
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"❌ LLM API error {response.status}: {error_text[:200]}")
                        
                        if response.status == 429:
                            return self._get_fallback_response(error_type="rate_limited")
                        return self._get_fallback_response()
                    
                    data = await response.json(content_type=None)
                    content = self._extract_content(data)
                    
                    if not content:
                        logger.error(f"❌ LLM response missing content: {str(data)[:200]}")
                        return self._get_fallback_response()
                    
                    logger.debug(f"📥 LLM response ok ({len(content)} chars)")
                    return content
                    
        except asyncio.TimeoutError:
            logger.error("⏱️ LLM request timed out")
        except aiohttp.ClientError as e:
            logger.error(f"🌐 LLM network error: {e}")
        except ValueError as e:
            # body was not JSON
            logger.error(f"❌ LLM response not decodable: {e}")
        
        return self._get_fallback_response()
    
    @staticmethod
    def _extract_content(data: Any) -> str:
        if not isinstance(data, dict):
            return ""
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return ""
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            return ""
        return content.strip()
    
    def _get_fallback_response(self, error_type: str = "general_failure") -> str:
        """
        Canned one-line text used whenever a completion fails
        
        Args:
            error_type: rate_limited | general_failure
        """
        fallback_map = {
            "rate_limited": RATE_LIMITED_NARRATIVE,
            "general_failure": FALLBACK_NARRATIVE,
        }
        
        return fallback_map.get(error_type, fallback_map["general_failure"])
    
    async def batch_complete(
        self,
        prompts: List[Dict[str, str]],
        temperature: Optional[float] = None
    ) -> List[str]:
        """
        Run several completions concurrently
        
        Args:
            prompts: list of {"system": ..., "user": ...}
            temperature: optional override
            
        Returns:
            one response per prompt, in prompt order
        """
        tasks = [
            self.chat_complete(
                system_prompt=p["system"],
                user_prompt=p["user"],
                temperature=temperature
            )
            for p in prompts
        ]
        
        results = await asyncio.gather(*tasks, return_exceptions=True)
        
        processed_results = []
        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                logger.error(f"❌ Batch request {idx} failed: {result}")
                processed_results.append(self._get_fallback_response())
            else:
                processed_results.append(result)
        
        return processed_results
    
    def health_check(self) -> Dict[str, Any]:
        return {
            "status": "configured",
            "model": self.model,
            "timeout": self.timeout,
            "url": self.url[:50] + ("..." if len(self.url) > 50 else "")
        }
