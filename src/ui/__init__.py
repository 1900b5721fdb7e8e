"""NiceGUI interface - thin visualization layer over per-page state.

Pages:
    - / : pick PDFs, ask one question, read and copy the answer
    - /chat : upload PDFs, then ask questions turn by turn

Interaction state lives in ui.state and is created per page visit, so
two browser tabs never share files or messages. Widgets only read that
state and call its methods.
"""
