from enum import Enum


class CommandKind(Enum):
    PASTE = "paste"
    CLEAR = "clear"


class Command:
    def undo(self): raise NotImplementedError
    def redo(self): raise NotImplementedError


# --- 批次命令：批次已经由调用方应用到图层，入栈时不再执行 redo ---
class BatchCommand(Command):
    kind = None

    def __init__(self, layer, batch):
        self.layer, self.batch = layer, batch

    def undo(self):
        self.layer.remove_batch(self.batch)

    def redo(self):
        self.layer.add_batch(self.batch)

    def __repr__(self):
        return f"{type(self).__name__}({self.layer!r}, {self.batch!r})"


class PasteCommand(BatchCommand):
    kind = CommandKind.PASTE


class ClearCommand(BatchCommand):
    kind = CommandKind.CLEAR


COMMAND_TYPES = {
    CommandKind.PASTE: PasteCommand,
    CommandKind.CLEAR: ClearCommand,
}


def create_command(kind, layer, batch):
    return COMMAND_TYPES[CommandKind(kind)](layer, batch)

