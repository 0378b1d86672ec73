class SessionGate:
    """Logged-in flag deciding whether the login form or the product manager is shown."""

    def __init__(self):
        self.logged_in = False

    def login(self, success: bool) -> None:
        # a failed login is reported by the login form; the gate stays closed
        if success:
            self.logged_in = True

    def logout(self) -> None:
        self.logged_in = False
