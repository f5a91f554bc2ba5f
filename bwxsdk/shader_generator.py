"""GLSL source generation with a cache of generated shaders."""

from __future__ import annotations

__all__ = [
    "get_vertex_shader",
    "get_fragment_shader",
    "generate_vertex_shader",
    "generate_fragment_shader",
    "clear_cache",
    "get_default_skybox_vertex_shader",
    "get_default_skybox_fragment_shader",
    "get_default_ttf_vertex_shader",
    "get_default_ttf_fragment_shader",
    "get_light_struct_block",
    "get_light_calculation_function",
]

_cache: dict[str, str] = {}


def get_vertex_shader(
    use_normals: bool = True, use_tex_coords: bool = True, use_lighting: bool = True
) -> str:
    """Return a cached vertex shader for the given options."""
    key = f"V_{int(bool(use_normals))}_{int(bool(use_tex_coords))}_{int(bool(use_lighting))}"
    if key not in _cache:
        _cache[key] = generate_vertex_shader(use_normals, use_tex_coords, use_lighting)
    return _cache[key]


def get_fragment_shader(use_textures: bool = True, use_lighting: bool = True) -> str:
    """Return a cached fragment shader for the given options."""
    key = f"F_{int(bool(use_textures))}_{int(bool(use_lighting))}"
    if key not in _cache:
        _cache[key] = generate_fragment_shader(use_textures, use_lighting)
    return _cache[key]


def clear_cache() -> None:
    """Forget every cached shader."""
    _cache.clear()


def get_default_skybox_vertex_shader() -> str:
    """Return the built-in skybox vertex shader."""
    return (
        "\n"
        "                #version 450 core\n"
        "                layout(location = 0) in vec3 aPosition;\n"
        "                out vec3 TexCoords;\n"
        "                uniform mat4 uView;\n"
        "                uniform mat4 uProjection;\n"
        "                void main() {\n"
        "                    TexCoords = aPosition;\n"
        "                    vec4 pos = uProjection * uView * vec4(aPosition, 1.0);\n"
        "                    gl_Position = pos.xyww;\n"
        "                }\n"
        "            "
    )


def get_default_skybox_fragment_shader() -> str:
    """Return the built-in skybox fragment shader."""
    return (
        "\n"
        "                #version 450 core\n"
        "                in vec3 TexCoords;\n"
        "                out vec4 FragColor;\n"
        "                uniform samplerCube uSkybox;\n"
        "                void main() {\n"
        "                    FragColor = texture(uSkybox, TexCoords);\n"
        "                }\n"
        "            "
    )


def get_default_ttf_vertex_shader() -> str:
    """Return the built-in vertex shader for TrueType text rendering."""
    return (
        "\n"
        "                #version 450 core\n"
        "                layout (location = 0) in vec4 vertex;\n"
        "                out vec2 TexCoords;\n"
        "                uniform mat4 projection;\n"
        "                void main() {\n"
        "                    gl_Position = projection * vec4(vertex.xy, 0.0, 1.0);\n"
        "            \t    TexCoords = vertex.zw;\n"
        "                };\n"
        "            "
    )


def get_default_ttf_fragment_shader() -> str:
    """Return the built-in fragment shader for TrueType text rendering."""
    return (
        "\n"
        "            #version 450 core\n"
        "            in vec2 TexCoords;\n"
        "            out vec4 color;\n"
        "            uniform sampler2D text;\n"
        "            uniform vec4 textColor;\n"
        "            void main() {\n"
        "                vec4 sampled = vec4(1.0, 1.0, 1.0, texture(text, TexCoords).r);\n"
        "                color = textColor * sampled;\n"
        "            };\n"
        "        "
    )


def get_light_struct_block() -> str:
    """Return the GLSL light structure and its std140 uniform block."""
    return (
        "\n"
        "\t\t#define MAX_LIGHTS 64\n"
        "\n"
        "\t\tstruct Light {\n"
        "\t\t\tvec4 position;     // xyz: position, w: type\n"
        "\t\t\tvec4 direction;    // xyz: direction, w: inner cone\n"
        "\t\t\tvec4 diffuse;      // rgb: color, a: power\n"
        "\t\t\tvec4 ambient;      // rgb: ambient, a: range\n"
        "\t\t\tvec4 specular;     // rgb: specular, a: outer cone\n"
        "\t\t\tvec4 attenuation;  // x: constant, y: linear, z: quadratic, w: unused\n"
        "\t\t};\n"
        "\n"
        "\t\tlayout(std140, binding = 2) uniform LightBlock {\n"
        "\t\t\tLight lights[MAX_LIGHTS];\n"
        "\t\t};\n"
        "\t"
    )


def get_light_calculation_function() -> str:
    """Return the GLSL function that computes one light's contribution."""
    return (
        "\n"
        "\t\tvec3 CalculateLighting(Light light, vec3 normal, vec3 fragPos, vec3 viewDir)\n"
        "\t\t{\n"
        "\t\t\tvec3 lightDir = normalize(light.position.xyz - fragPos);\n"
        "\t\t\tfloat diff = max(dot(normal, lightDir), 0.0);\n"
        "\n"
        "\t\t\t// Attenuation\n"
        "\t\t\tfloat distance = length(light.position.xyz - fragPos);\n"
        "\t\t\tfloat attenuation = 1.0 / (\n"
        "\t\t\t\tlight.attenuation.x +\n"
        "\t\t\t\tlight.attenuation.y * distance +\n"
        "\t\t\t\tlight.attenuation.z * distance * distance);\n"
        "\n"
        "\t\t\tvec3 diffuse = light.diffuse.rgb * diff;\n"
        "\t\t\tvec3 ambient = light.ambient.rgb;\n"
        "\t\t\tvec3 specular = vec3(0.0); // no specular term\n"
        "\n"
        "\t\t\treturn (ambient + diffuse + specular) * attenuation * light.diffuse.a;\n"
        "\t\t}\n"
        "\t"
    )


def generate_vertex_shader(use_normals: bool, use_tex_coords: bool, use_lighting: bool) -> str:
    """Build a vertex shader; ``use_lighting`` does not change the output."""
    lines = ["#version 330 core\n\n", "layout(location = 0) in vec3 aPos;\n"]
    if use_normals:
        lines.append("layout(location = 1) in vec3 aNormal;\n")
    if use_tex_coords:
        lines.append("layout(location = 2) in vec2 aTexCoords;\n")
    lines += [
        "uniform mat4 model;\n",
        "uniform mat4 view;\n",
        "uniform mat4 projection;\n\n",
        "out vec3 FragPos;\n",
    ]
    if use_normals:
        lines.append("out vec3 Normal;\n")
    if use_tex_coords:
        lines.append("out vec2 TexCoords;\n")
    lines += ["void main() {\n", "\tFragPos = vec3(model * vec4(aPos, 1.0));\n"]
    if use_normals:
        lines.append("\tNormal = mat3(transpose(inverse(model))) * aNormal;\n")
    if use_tex_coords:
        lines.append("\tTexCoords = aTexCoords;\n")
    lines += ["\tgl_Position = projection * view * vec4(FragPos, 1.0);\n", "}\n"]
    return "".join(lines)


def generate_fragment_shader(use_textures: bool, use_lighting: bool) -> str:
    """Build a fragment shader with optional diffuse texture and lighting."""
    lines = [
        "#version 330 core\n\n",
        "in vec3 FragPos;\n",
        "in vec3 Normal;\n",
        "in vec2 TexCoords;\n",
        "out vec4 FragColor;\n",
        "uniform vec3 viewPos;\n",
    ]
    if use_textures:
        lines.append("uniform sampler2D diffuseMap;\n")
    if use_lighting:
        lines.append(get_light_struct_block())
        lines.append(get_light_calculation_function())
    lines += [
        "\nvoid main() {\n",
        "\tvec3 norm = normalize(Normal);\n",
        "\tvec3 viewDir = normalize(viewPos - FragPos);\n",
        "\tvec3 result = vec3(0.0);\n",
    ]
    if use_lighting:
        lines += [
            "\tfor (int i = 0; i < MAX_LIGHTS; ++i) {\n",
            "\t\tif (lights[i].diffuse.a == 0.0) break;\n",
            "\t\tresult += CalculateLighting(lights[i], norm, FragPos, viewDir);\n",
            "\t}\n",
        ]
    else:
        lines.append("\tresult = vec3(1.0);\n")
    if use_textures:
        lines += [
            "\tvec4 texColor = texture(diffuseMap, TexCoords);\n",
            "\tFragColor = vec4(result, 1.0) * texColor;\n",
        ]
    else:
        lines.append("\tFragColor = vec4(result, 1.0);\n")
    lines.append("}\n")
    return "".join(lines)