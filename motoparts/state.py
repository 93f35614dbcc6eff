from motoparts.states.root_state import RootState


class State(RootState):
    """
    Main application state.
    Inherits from RootState, which combines the screen mixins.
    """

    pass
