""" Command to be executed. """


class Command:
    """ A resolved command: the verb and its arguments. """
    def __init__(self, name, args, alias=None):
        self.name = name
        self.args = args
        self.alias = alias        # alias name this command came from, or None

    @property
    def tokens(self) -> list[str]:
        return [self.name] + self.args

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r})"
