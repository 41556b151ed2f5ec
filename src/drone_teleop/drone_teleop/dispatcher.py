import time

from .config import TeleopConfig
from .service_gateway import ServiceUnavailableError
from .velocity import VelocityCommand


EXIT_KEY = 'x'

# key -> (VelocityCommand field, direction)
MOTION_KEYS = {
    'w': ('linear_x', 1.0),
    's': ('linear_x', -1.0),
    'a': ('linear_y', 1.0),
    'd': ('linear_y', -1.0),
    'q': ('angular_z', 1.0),
    'e': ('angular_z', -1.0),
    'r': ('linear_z', 1.0),
    'f': ('linear_z', -1.0),
}

KEY_HELP = [
    ('w / s', 'Forward / backward'),
    ('a / d', 'Left / right'),
    ('q / e', 'Yaw left / yaw right'),
    ('r / f', 'Up / down'),
    ('m', 'Set GUIDED mode'),
    ('t', 'Arm and take off'),
    ('l', 'Land'),
    ('z', 'Disarm'),
    ('x', 'Exit'),
]


class TeleopSession:
    """
    Keyboard teleop state for one vehicle.

    Owns the single live VelocityCommand. Each key resets it to zero, then
    either sets one axis (motion keys) or runs a flight action through the
    service gateway. Mode, arm and disarm actions are skipped when the
    cached vehicle state already matches the requested outcome.
    """

    def __init__(self, gateway, state_cache, publish, logger,
                 config: TeleopConfig = None, sleep=time.sleep):
        self.gateway = gateway
        self.state_cache = state_cache
        self.publish = publish
        self.logger = logger
        self.config = config or TeleopConfig()
        self.sleep = sleep

        self.velocity = VelocityCommand()
        self.actions = {
            'm': self.set_mode_guided,
            't': self.arm_and_takeoff,
            'l': self.land,
            'z': self.disarm,
        }

    # ========================================
    # Flight actions

    def set_mode_guided(self):
        mode = self.config.guided_mode
        if self.state_cache.current().mode == mode:
            self.logger.info(f"Already in {mode} mode")
            return
        self.gateway.set_mode(mode)

    def arm(self):
        if self.state_cache.current().armed:
            self.logger.info("Drone already armed")
            return
        self.gateway.arm()

    def disarm(self):
        if not self.state_cache.current().armed:
            self.logger.info("Drone already disarmed")
            return
        self.gateway.disarm()

    def arm_and_takeoff(self):
        self.arm()
        # Arm completion is never observed; wait a fixed time before takeoff
        self.sleep(self.config.arm_settle_time)
        self.gateway.takeoff(self.config.takeoff_altitude)

    def land(self):
        self.gateway.land()

    # ========================================
    # Input handling

    def handle_key(self, key: str) -> bool:
        """Apply one key to the velocity/actions. Returns False to stop the loop."""
        self.velocity.reset()

        if key == EXIT_KEY:
            self.logger.info("Exiting teleop...")
            return False
        if key == '':
            self.logger.info("End of input, exiting teleop...")
            return False

        if key in MOTION_KEYS:
            field, direction = MOTION_KEYS[key]
            setattr(self.velocity, field, direction * self.config.velocity_step)
            return True

        action = self.actions.get(key)
        if action is not None:
            try:
                action()
            except ServiceUnavailableError as e:
                self.logger.error(str(e))
        return True

    def publish_velocity(self):
        self.publish(self.velocity)
        self.logger.info(f"Sending command: {self.velocity.describe()}")

    def step(self, key: str) -> bool:
        if not self.handle_key(key):
            return False
        self.publish_velocity()
        return True

    def run(self, read_key, ok=lambda: True):
        """Read keys until exit, publishing the velocity once per key."""
        while ok():
            if not self.handle_key(read_key()):
                break
            # The runtime may have shut down while a key or service was awaited
            if not ok():
                break
            self.publish_velocity()
