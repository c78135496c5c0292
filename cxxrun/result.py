class Ok:
    ok = True

    def __init__(self, exit_code = 0):
        self.exit_code = exit_code

    def __repr__(self):
        return 'Ok({})'.format(self.exit_code)


class Err:
    ok = False

    def __init__(self, error):
        self.error = error

    @property
    def kind(self):
        return type(self.error)

    @property
    def detail(self):
        return self.error.what()

    @property
    def exit_code(self):
        return self.error.exit_code()

    def __repr__(self):
        return 'Err({}, {})'.format(self.kind.__name__, repr(self.detail))
