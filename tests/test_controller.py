"""Unit tests for SwitchController (command session)."""
import unittest
from unittest.mock import MagicMock, patch, call

from switchcontroller.buttons import Button, Stick
from switchcontroller.controller import SwitchController
from switchcontroller.errors import TransportIOError, TransportOpenError
from switchcontroller.models import ControllerState, PressCommand, SleepCommand
from switchcontroller.transport import MemoryTransport, Transport


class TestSwitchControllerCommands(unittest.TestCase):
    """Each operation writes exactly one terminated line."""

    def setUp(self):
        self.transport = MemoryTransport()
        self.ctrl = SwitchController(self.transport)

    def test_press(self):
        self.ctrl.press([Button.A])
        self.assertEqual(self.transport.getvalue(), b"PRESS a\n")

    def test_press_multiple(self):
        self.ctrl.press([Button.A, Button.B])
        self.assertEqual(self.transport.getvalue(), b"PRESS a b\n")

    def test_hold(self):
        self.ctrl.hold([Button.ZR])
        self.assertEqual(self.transport.getvalue(), b"HOLD zr\n")

    def test_release(self):
        self.ctrl.release([Button.ZR, Button.ZL])
        self.assertEqual(self.transport.getvalue(), b"RELEASE zr zl\n")

    def test_stick(self):
        self.ctrl.stick(Stick.LEFT, 1.0, 0.0)
        self.assertEqual(self.transport.getvalue(), b"STICK l_stick 1 0\n")

    def test_state(self):
        state = ControllerState().set_button(Button.A, True).set_left_stick(0.5, -1.0)
        self.ctrl.state(state)
        self.assertEqual(self.transport.getvalue(), b"STATE 100000000000000000 0.5 -1\n")

    def test_sleep(self):
        self.ctrl.sleep(0.1)
        self.assertEqual(self.transport.getvalue(), b"SLEEP 0.1\n")

    def test_send_command(self):
        self.ctrl.send_command(PressCommand([Button.HOME]))
        self.assertEqual(self.transport.getvalue(), b"PRESS home\n")

    def test_send_unknown_command(self):
        with self.assertRaises(ValueError):
            self.ctrl.send_command(object())
        self.assertEqual(self.transport.write_count, 0)

    def test_one_write_and_flush_per_command(self):
        self.ctrl.press([Button.A])
        self.ctrl.sleep(1)
        self.assertEqual(self.transport.write_count, 2)
        self.assertEqual(self.transport.flush_count, 2)

    def test_program_order_is_wire_order(self):
        self.ctrl.hold([Button.ZR])
        self.ctrl.sleep(0.1)
        self.ctrl.press([Button.A])
        self.ctrl.release([Button.ZR])
        self.assertEqual(
            self.transport.lines(),
            ["HOLD zr", "SLEEP 0.1", "PRESS a", "RELEASE zr"],
        )


class TestSwitchControllerTransport(unittest.TestCase):
    """Tests for transport interaction and error propagation."""

    def test_write_then_flush(self):
        transport = MagicMock(spec=Transport)
        SwitchController(transport).press([Button.Y])

        self.assertEqual(
            transport.mock_calls,
            [call.write(b"PRESS y\n"), call.flush()],
        )

    def test_write_error_propagates(self):
        transport = MagicMock(spec=Transport)
        error = TransportIOError("boom")
        transport.write.side_effect = error

        ctrl = SwitchController(transport)
        with self.assertRaises(TransportIOError) as ctx:
            ctrl.press([Button.A])

        self.assertIs(ctx.exception, error)
        transport.flush.assert_not_called()

    def test_flush_error_propagates(self):
        transport = MagicMock(spec=Transport)
        transport.flush.side_effect = OSError("unplugged")

        with self.assertRaises(OSError):
            SwitchController(transport).sleep(1.0)

    def test_closed_transport(self):
        transport = MemoryTransport()
        ctrl = SwitchController(transport)
        ctrl.close()

        with self.assertRaises(TransportIOError):
            ctrl.press([Button.A])

    def test_context_manager_closes(self):
        transport = MagicMock(spec=Transport)
        with SwitchController(transport) as ctrl:
            self.assertIs(ctrl.transport, transport)
        transport.close.assert_called_once()


class TestSwitchControllerOpen(unittest.TestCase):
    """Tests for SwitchController.open()."""

    @patch('switchcontroller.controller.SerialTransport')
    def test_open_defaults(self, mock_transport_class):
        ctrl = SwitchController.open("/dev/ttyACM0")

        mock_transport_class.open.assert_called_once_with(
            "/dev/ttyACM0", baudrate=115200, timeout=1.0
        )
        self.assertIs(ctrl.transport, mock_transport_class.open.return_value)

    @patch('switchcontroller.controller.SerialTransport')
    def test_open_custom_baud(self, mock_transport_class):
        SwitchController.open("COM3", 9600)
        mock_transport_class.open.assert_called_once_with(
            "COM3", baudrate=9600, timeout=1.0
        )

    @patch('switchcontroller.controller.SerialTransport')
    def test_open_failure_propagates(self, mock_transport_class):
        mock_transport_class.open.side_effect = TransportOpenError("no such port")
        with self.assertRaises(TransportOpenError):
            SwitchController.open("/dev/nope")


if __name__ == '__main__':
    unittest.main()
