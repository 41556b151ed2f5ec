from dataclasses import dataclass, fields


@dataclass
class TeleopConfig:
    # Topics
    cmd_vel_topic: str = '/mavros/setpoint_velocity/cmd_vel_unstamped'
    state_topic: str = '/mavros/state'

    # MAVROS services
    set_mode_service: str = '/mavros/set_mode'
    arming_service: str = '/mavros/cmd/arming'
    takeoff_service: str = '/mavros/cmd/takeoff'
    land_service: str = '/mavros/cmd/land'

    # Motion and flight behaviour
    velocity_step: float = 0.1
    guided_mode: str = 'GUIDED'
    takeoff_altitude: float = 3.0
    arm_settle_time: float = 3.0

    # Service reachability polling; timeout 0 means wait forever
    service_wait_interval: float = 2.0
    service_wait_timeout: float = 0.0

    def validate(self):
        if self.velocity_step <= 0.0:
            raise ValueError(f"velocity_step must be positive, got {self.velocity_step}")
        if self.takeoff_altitude <= 0.0:
            raise ValueError(f"takeoff_altitude must be positive, got {self.takeoff_altitude}")
        if self.arm_settle_time < 0.0:
            raise ValueError(f"arm_settle_time must not be negative, got {self.arm_settle_time}")
        if self.service_wait_interval <= 0.0:
            raise ValueError(
                f"service_wait_interval must be positive, got {self.service_wait_interval}")
        if self.service_wait_timeout < 0.0:
            raise ValueError(
                f"service_wait_timeout must not be negative, got {self.service_wait_timeout}")
        if not self.guided_mode:
            raise ValueError("guided_mode must not be empty")
        return self

    @classmethod
    def parameter_defaults(cls):
        """(name, default) pairs used to declare the node parameters."""
        defaults = cls()
        return [(f.name, getattr(defaults, f.name)) for f in fields(cls)]

    @classmethod
    def from_node(cls, node) -> 'TeleopConfig':
        """Declare every field as a ROS parameter and read back its value."""
        values = {}
        for name, default in cls.parameter_defaults():
            if not node.has_parameter(name):
                node.declare_parameter(name, default)
            values[name] = node.get_parameter(name).value
        return cls(**values).validate()
