from dataclasses import dataclass


@dataclass
class VelocityCommand:
    """Body velocity setpoint sent to the vehicle every input iteration."""
    linear_x: float = 0.0   # forward / backward
    linear_y: float = 0.0   # left / right
    linear_z: float = 0.0   # up / down
    angular_z: float = 0.0  # yaw rate

    def reset(self):
        self.linear_x = 0.0
        self.linear_y = 0.0
        self.linear_z = 0.0
        self.angular_z = 0.0

    def describe(self) -> str:
        return (f"x={self.linear_x:.2f}, y={self.linear_y:.2f}, "
                f"z={self.linear_z:.2f}, yaw={self.angular_z:.2f}")


def to_twist(command: VelocityCommand, twist):
    """Copy the command into a geometry_msgs/Twist instance."""
    twist.linear.x = float(command.linear_x)
    twist.linear.y = float(command.linear_y)
    twist.linear.z = float(command.linear_z)
    twist.angular.z = float(command.angular_z)
    return twist
