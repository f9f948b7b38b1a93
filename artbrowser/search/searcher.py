"""
Search execution module: the busy/results lifecycle shared by every lookup.
"""
from typing import Any, Awaitable, Callable, Dict, Optional

from ..core.error import log_error
from ..core.logger import get_logger
from ..core.state import SetBusy, SetResults
from ..models.schema import ResultEnvelope

logger = get_logger()

LookupCall = Callable[[], Awaitable[ResultEnvelope]]


async def run_lookup(
    call: LookupCall,
    set_busy: SetBusy,
    set_results: SetResults,
    *,
    context: Optional[Dict[str, Any]] = None,
) -> bool:
    """
    Run one lookup against the shared state.

    The sequence is fixed: busy on, await the collaborator, replace the
    results on success, busy off. Failures are logged and swallowed; the
    results keep their pre-call value.

    Args:
        call: Zero-argument callable returning the collaborator awaitable
        set_busy: Busy flag mutator
        set_results: Results mutator
        context: Extra details for the log lines

    Returns:
        True if the results were replaced, False if the lookup failed
    """
    context = context or {}
    set_busy(True)
    try:
        envelope = await call()
        set_results(envelope)
        logger.info(f"Lookup {context} settled with {len(envelope.get('records', []))} records")
        return True
    except Exception as e:
        log_error(e, logger, context=context)
        return False
    finally:
        set_busy(False)
