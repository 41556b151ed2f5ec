#!/usr/bin/env python3

import threading

import rclpy
from rclpy.executors import SingleThreadedExecutor
from rclpy.node import Node
from geometry_msgs.msg import Twist
from mavros_msgs.msg import State
from mavros_msgs.srv import CommandBool, CommandTOL, SetMode
from rich.console import Console
from rich.table import Table

from .config import TeleopConfig
from .dispatcher import KEY_HELP, TeleopSession
from .keyboard import read_key
from .service_gateway import ServiceGateway, make_endpoint
from .state_cache import VehicleStateCache
from .velocity import to_twist


class TeleopDroneNode(Node):
    def __init__(self):
        super().__init__('teleop_drone')

        self.config = TeleopConfig.from_node(self)

        # Velocity setpoints
        self.cmd_vel_pub = self.create_publisher(Twist, self.config.cmd_vel_topic, 10)

        # Vehicle state
        self.state_cache = VehicleStateCache()
        self.state_sub = self.create_subscription(
            State,
            self.config.state_topic,
            self.state_callback,
            10
        )

        # Mode, arming, takeoff and landing services
        self.gateway = ServiceGateway(
            set_mode=make_endpoint(self, SetMode, self.config.set_mode_service, 'SetMode'),
            arming=make_endpoint(self, CommandBool, self.config.arming_service, 'Arming'),
            takeoff=make_endpoint(self, CommandTOL, self.config.takeoff_service, 'Takeoff'),
            land=make_endpoint(self, CommandTOL, self.config.land_service, 'Land'),
            logger=self.get_logger(),
            wait_interval=self.config.service_wait_interval,
            wait_timeout=self.config.service_wait_timeout,
            ok=rclpy.ok,
        )

        self.session = TeleopSession(
            gateway=self.gateway,
            state_cache=self.state_cache,
            publish=self.publish_velocity,
            logger=self.get_logger(),
            config=self.config,
        )

        self.get_logger().info(
            f"Teleop drone node started! Press 'm' to set {self.config.guided_mode}, "
            "'t' to arm & take off, 'l' to land, 'z' to disarm, 'x' to exit."
        )

    def state_callback(self, msg):
        previous = self.state_cache.current()
        state = self.state_cache.update_from_msg(msg)
        if state != previous:
            self.get_logger().debug(f"Vehicle state: armed={state.armed}, mode='{state.mode}'")

    def publish_velocity(self, command):
        self.cmd_vel_pub.publish(to_twist(command, Twist()))

    def run(self):
        self.session.run(read_key, ok=rclpy.ok)


def print_key_bindings(console=None):
    table = Table(title="Drone Teleop Keys")
    table.add_column("Key", style="cyan")
    table.add_column("Action")
    for key, action in KEY_HELP:
        table.add_row(key, action)
    (console or Console()).print(table)


def main(args=None):
    rclpy.init(args=args)
    node = None
    executor = SingleThreadedExecutor()

    try:
        node = TeleopDroneNode()

        # State notifications and service responses are handled off the input thread
        executor.add_node(node)
        threading.Thread(target=executor.spin, daemon=True).start()

        print_key_bindings()
        node.run()
    except KeyboardInterrupt:
        pass
    finally:
        executor.shutdown()
        if node is not None:
            node.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()


if __name__ == '__main__':
    main()
