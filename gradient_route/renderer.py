"""Progressive rendering of gradient polylines onto a map surface."""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Callable, Optional

from .geo_utils import route_length_km
from .interfaces import BuildResult, RenderRequest
from .segment_builder import build
from .simplifier import ShapelySimplifier, Simplifier
from .surface import MapSurface

logger = logging.getLogger(__name__)

class RenderState:
    """Constants for the stages of a render."""
    IDLE = "Idle"
    COMPUTING = "Computing"
    APPLYING = "Applying"
    DONE = "Done"
    CANCELLED = "Cancelled"
    FAILED = "Failed"

class ProgressiveRenderer:
    """Draw a gradient route one segment at a time.
    
    A render runs in two phases. The compute phase simplifies the route and
    builds segments on a worker thread. The apply phase runs on the event
    loop: it locks map gestures, adds each segment followed by a
    non-blocking pause, then unlocks gestures and signals completion.
    
    The apply phase is fail-fast. If the surface raises while adding a
    segment, the remaining segments are dropped, gestures stay locked and
    ``on_complete`` is never called. Cancellation behaves the same way
    except that no error is raised when it comes through ``cancel_event``.
    Callers that need gestures restored in those cases must do it
    themselves.
    """

    def __init__(self, simplifier: Optional[Simplifier] = None, executor: Optional[Executor] = None):
        self.simplifier = simplifier or ShapelySimplifier()
        self.executor = executor
        self.state = RenderState.IDLE
        self.applied = 0

    def compute(self, request: RenderRequest) -> BuildResult:
        """Simplify the route and build its segments.
        
        Errors raised by the simplifier propagate to the caller.
        """
        simplified = self.simplifier.simplify(request.route, request.tolerance)
        logger.debug(f"Route of {len(request.route)} points simplified to {len(simplified)} points, "
                     f"{route_length_km(simplified):.2f} km")
        return build(simplified, request.start_color, request.end_color, request.style)

    async def render(
        self,
        request: RenderRequest,
        surface: MapSurface,
        on_complete: Optional[Callable[[], None]] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> BuildResult:
        """Compute the segments and add them to the surface progressively.
        
        Args:
            request: Route, colors, style and pacing of the draw
            surface: Map surface, only touched from the running event loop
            on_complete: Called once after the last segment on success
            cancel_event: Cancellation token checked before each segment
            
        Returns:
            The BuildResult that was computed for the request
        """
        self.state = RenderState.COMPUTING
        self.applied = 0
        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(self.executor, self.compute, request)
        except asyncio.CancelledError:
            self.state = RenderState.CANCELLED
            raise
        except Exception:
            self.state = RenderState.FAILED
            raise

        logger.info(f"Drawing {len(result.segments)} segments with {request.delay_ms}ms delay")
        self.state = RenderState.APPLYING
        delay = request.delay_ms / 1000.0
        surface.set_interaction_enabled(False)
        for segment in result.segments:
            if cancel_event is not None and cancel_event.is_set():
                logger.warning(f"Render cancelled after {self.applied} of {len(result.segments)} segments")
                self.state = RenderState.CANCELLED
                return result
            try:
                surface.add_overlay(segment)
            except Exception as e:
                logger.error(f"Failed to add segment {self.applied + 1}: {str(e)}")
                self.state = RenderState.FAILED
                raise
            self.applied += 1
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                logger.warning(f"Render cancelled after {self.applied} of {len(result.segments)} segments")
                self.state = RenderState.CANCELLED
                raise

        surface.set_interaction_enabled(True)
        self.state = RenderState.DONE
        logger.info(f"Finished drawing {self.applied} segments")
        if on_complete is not None:
            on_complete()
        return result

    def start(
        self,
        request: RenderRequest,
        surface: MapSurface,
        on_complete: Optional[Callable[[], None]] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> "asyncio.Task[BuildResult]":
        """Schedule ``render`` on the running loop and return its task.
        
        Cancelling the task stops the draw before the next segment.
        """
        return asyncio.ensure_future(self.render(request, surface, on_complete, cancel_event))
