"""Pointer gestures - brush strokes, lasso selection, dragging a selection

Each gesture is a small state machine driven by pointer events that the
front end has already mapped to grid indices:

	StrokeGesture:        IDLE -> DRAWING -> COMMITTING -> IDLE
	LassoGesture:         IDLE -> LASSOING -> LIFTED
	MoveSelectionGesture: IDLE -> MOVING -> IDLE

GestureController picks the gesture for the current tool on pointer down
and routes the following events to it until pointer up.
"""
import logging
from enum import Enum

from spritegrid.models.editor.tools import Tool
from spritegrid.models.grid import index_to_xy
from spritegrid.utils.line import get_line_pixels


class GestureState(Enum):
	IDLE = 'idle'
	DRAWING = 'drawing'
	COMMITTING = 'committing'
	LASSOING = 'lassoing'
	LIFTED = 'lifted'
	MOVING = 'moving'


class StrokeGesture:
	"""Brush or eraser drag, committed as one history step"""
	
	def __init__(self, editor):
		"""Initialize with reference to the editor
		
		Args:
			editor: The EditorState being painted
		"""
		self.editor = editor
		self.state = GestureState.IDLE
		self.constraint = None
		self.last_index = None
		self.changed = False
	
	def begin(self, index):
		"""Start a stroke; the mask constraint is fixed from this cell"""
		if self.editor.playing:
			return False
		self.state = GestureState.DRAWING
		self.constraint = self.editor.selection.constraint_for(index)
		self.last_index = index
		self.changed = self.editor.paint_cell(index, constraint=self.constraint)
		return True
	
	def move(self, index):
		"""Paint the gap-free line from the previous sample to index"""
		if self.state is not GestureState.DRAWING or index == self.last_index:
			return
		painted = self.editor.paint_line(self.last_index, index, constraint=self.constraint)
		self.changed = self.changed or bool(painted)
		self.last_index = index
	
	def end(self):
		"""Finish the stroke
		
		Returns:
			True if the stroke recorded a history step
		"""
		if self.state is not GestureState.DRAWING:
			return False
		self.state = GestureState.COMMITTING
		committed = False
		if self.changed:
			description = "Erase" if self.editor.tool is Tool.ERASER else "Brush stroke"
			committed = self.editor.commit(description)
		self.state = GestureState.IDLE
		self.constraint = None
		self.last_index = None
		self.changed = False
		return committed


class LassoGesture:
	"""Freehand selection: the traced path becomes a lasso boundary"""
	
	def __init__(self, editor):
		self.editor = editor
		self.state = GestureState.IDLE
		self._boundary = []
		self._last_index = None
	
	@property
	def boundary(self):
		"""Path traced so far, for preview"""
		return list(self._boundary)
	
	def begin(self, index):
		"""Start tracing; an existing selection not under the pointer is committed"""
		if self.editor.playing:
			return False
		if not self.editor.selection.contains(index):
			self.editor.clear_selection()
		self.state = GestureState.LASSOING
		self._boundary = [index]
		self._last_index = index
		return True
	
	def move(self, index):
		if self.state is not GestureState.LASSOING or index == self._last_index:
			return
		seen = set(self._boundary)
		for i in get_line_pixels(self._last_index, index, self.editor.size):
			if i not in seen:
				seen.add(i)
				self._boundary.append(i)
		self._last_index = index
	
	def end(self):
		"""Close the path, select the enclosed cells and lift them
		
		Returns:
			The new selection (frozenset)
		"""
		if self.state is not GestureState.LASSOING:
			return self.editor.selection.indices
		selection = self.editor.lasso_select(self._boundary)
		self.state = GestureState.LIFTED if selection else GestureState.IDLE
		self._boundary = []
		self._last_index = None
		return selection


class MoveSelectionGesture:
	"""Drag a floating selection around the grid
	
	Pointer motion becomes separate x and y nudges, so a shape pressed
	against a grid edge still slides along it. The anchor follows the
	pointer even when a nudge is refused.
	"""
	
	def __init__(self, editor):
		self.editor = editor
		self.state = GestureState.IDLE
		self.anchor = None
		self._logger = logging.getLogger('MoveSelectionGesture')
	
	def begin(self, index):
		"""Start dragging; only valid when pressing inside the selection"""
		editor = self.editor
		if editor.playing or not editor.selection.contains(index):
			return False
		if not editor.floating.active:
			editor.lift_selection()
		self.state = GestureState.MOVING
		self.anchor = index_to_xy(index, editor.size)
		return True
	
	def move(self, index):
		if self.state is not GestureState.MOVING:
			return
		x, y = index_to_xy(index, self.editor.size)
		dx = x - self.anchor[0]
		dy = y - self.anchor[1]
		if dx and not self.editor.nudge_selection(dx, 0):
			self._logger.debug(f"Horizontal move {dx} blocked")
		if dy and not self.editor.nudge_selection(0, dy):
			self._logger.debug(f"Vertical move {dy} blocked")
		self.anchor = (x, y)
	
	def end(self):
		self.state = GestureState.IDLE
		self.anchor = None


class GestureController:
	"""Routes pointer events to the gesture for the current tool"""
	
	def __init__(self, editor):
		"""Initialize with reference to the editor
		
		Args:
			editor: The EditorState receiving the gestures
		"""
		self.editor = editor
		self.stroke = StrokeGesture(editor)
		self.lasso = LassoGesture(editor)
		self.move_selection = MoveSelectionGesture(editor)
		self._active = None
	
	@property
	def active_gesture(self):
		return self._active
	
	def is_busy(self):
		return self._active is not None
	
	def pointer_down(self, index):
		"""Start a gesture at a grid index
		
		The fill tool acts immediately and starts no gesture. Presses while
		another gesture runs or while playback is on are ignored.
		
		Returns:
			True if the press was handled
		"""
		editor = self.editor
		if editor.playing or self._active is not None:
			return False
		
		if editor.tool is Tool.FILL:
			editor.fill(index)
			return True
		
		if editor.tool is Tool.SELECT:
			if editor.selection.contains(index):
				gesture = self.move_selection
			else:
				gesture = self.lasso
		else:
			gesture = self.stroke
		
		if not gesture.begin(index):
			return False
		self._active = gesture
		return True
	
	def pointer_move(self, index):
		if self._active is not None:
			self._active.move(index)
	
	def pointer_up(self):
		"""Finish the running gesture
		
		Returns:
			Whatever the gesture's end() returns, or None if none was running
		"""
		if self._active is None:
			return None
		gesture = self._active
		self._active = None
		return gesture.end()
