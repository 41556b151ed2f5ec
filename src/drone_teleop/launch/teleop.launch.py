#!/usr/bin/env python3

"""
Launch file for teleop_drone.

Starts the keyboard teleop node with its parameter file. Launched processes
get no stdin, so by default the node runs inside its own xterm.
"""

from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration, PathJoinSubstitution
from launch_ros.actions import Node
from launch_ros.substitutions import FindPackageShare


def generate_launch_description():
    """Generate launch description for teleop node."""

    use_sim_time_arg = DeclareLaunchArgument(
        'use_sim_time',
        default_value='true',
        description='Use simulation (Gazebo) clock if true'
    )

    config_file_arg = DeclareLaunchArgument(
        'config_file',
        default_value=PathJoinSubstitution([
            FindPackageShare('drone_teleop'),
            'config',
            'teleop.yaml'
        ]),
        description='Teleop parameter file'
    )

    terminal_prefix_arg = DeclareLaunchArgument(
        'terminal_prefix',
        default_value='xterm -e',
        description='Command used to give the node a terminal for key input'
    )

    teleop_node = Node(
        package='drone_teleop',
        executable='teleop_drone',
        name='teleop_drone',
        output='screen',
        prefix=LaunchConfiguration('terminal_prefix'),
        parameters=[
            LaunchConfiguration('config_file'),
            {'use_sim_time': LaunchConfiguration('use_sim_time')}
        ]
    )

    return LaunchDescription([
        use_sim_time_arg,
        config_file_arg,
        terminal_prefix_arg,
        teleop_node
    ])
