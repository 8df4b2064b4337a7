"""Copy-pasteable integration snippets for LMS and Twine hosts.

Each (platform, kind) pair maps to a Handlebars template rendered with the
realm, its greeting and the public base URL of this server. Host-side
placeholders such as {{student_id}} are passed in as literal values so they
survive rendering untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

from luma_wisp.models import Personality, Realm
from luma_wisp.personalities import all_personalities, lookup
from luma_wisp.prompts import render_prompt


class IntegrationError(ValueError):
    """Raised for an unknown platform or snippet kind."""


@dataclass(frozen=True)
class Snippet:
    platform: str
    kind: str
    realm: Realm
    filename: str
    code: str


# ── LMS ──────────────────────────────────────────────────

LMS_WIDGET = """\
<!-- Luma Wisp Educational Widget -->
<div id="luma-wisp-widget" data-realm="{{{realm}}}" data-user-id="{{{student_id}}}">
  <div class="luma-loading">Loading Luma Wisp...</div>
</div>

<script src="{{{base_url}}}/luma-widget.js"></script>
<script>
LumaWispWidget.init({
  container: '#luma-wisp-widget',
  realm: '{{{realm}}}',
  userId: '{{{student_id}}}', // Replace with your LMS user ID variable
  apiUrl: '{{{base_url}}}/api',
  size: 'medium', // small, medium, large
  position: 'bottom-right', // bottom-right, bottom-left, top-right, top-left
  showDailyThought: true,
  enableChat: true,

  onRealmChange: function(newRealm) {
    console.log('Luma transformed to:', newRealm);
  },
  onChatMessage: function(message, response) {
    console.log('Student message:', message, 'Luma response:', response);
  },
  onChallengeComplete: function(challengeId, points) {
    console.log('Challenge completed:', challengeId, 'Points:', points);
  }
});
</script>

<style>
#luma-wisp-widget {
  position: fixed;
  bottom: 20px;
  right: 20px;
  z-index: 1000;
  font-family: 'Comfortaa', cursive;
}
.luma-loading {
  background: linear-gradient(45deg, rgba(139, 92, 246, 0.8), rgba(59, 130, 246, 0.8));
  color: white;
  padding: 10px 20px;
  border-radius: 25px;
  font-size: 12px;
}
</style>"""

LMS_IFRAME = """\
<!-- Luma Wisp Embedded Learning Environment -->
<iframe
  src="{{{base_url}}}?embed=true&realm={{{realm}}}&user={{{student_id}}}&course={{{course_id}}}"
  width="100%"
  height="600px"
  frameborder="0"
  allow="microphone; camera; fullscreen"
  sandbox="allow-scripts allow-same-origin allow-forms allow-popups"
  title="Luma Wisp Academy of Remembrance"
  data-luma-realm="{{{realm}}}"
  data-student-id="{{{student_id}}}"
  data-course-id="{{{course_id}}}"
>
  <p>Your browser does not support iframes.
     <a href="{{{base_url}}}" target="_blank" rel="noopener">Open Luma Wisp Academy directly</a>
  </p>
</iframe>

<script>
window.addEventListener('message', function(event) {
  if (event.origin !== '{{{base_url}}}') return;
  const { type, data } = event.data;
  switch (type) {
    case 'luma.challenge.complete':
      console.log('Student completed challenge:', data);
      break;
    case 'luma.realm.change':
      console.log('Student changed realm to:', data.realm);
      break;
    case 'luma.conversation':
      console.log('Student chatted with Luma:', data);
      break;
  }
});
</script>"""

LMS_API = """\
// Luma Wisp LMS API Integration
// Server-side integration for your LMS backend

class LumaWispAPI {
  constructor(baseUrl = '{{{base_url}}}', apiKey = 'your-api-key') {
    this.baseUrl = baseUrl;
    this.apiKey = apiKey;
  }

  headers() {
    return {
      'Authorization': `Bearer ${this.apiKey}`,
      'Content-Type': 'application/json'
    };
  }

  async getStudentProgress(studentId) {
    const response = await fetch(`${this.baseUrl}/api/user/${studentId}/progress`, {
      headers: this.headers()
    });
    return response.json();
  }

  async startChatSession(studentId, realm = '{{{realm}}}') {
    const response = await fetch(`${this.baseUrl}/api/luma/chat`, {
      method: 'POST',
      headers: this.headers(),
      body: JSON.stringify({ message: 'Hello Luma!', realm, userId: studentId })
    });
    return response.json();
  }

  async completeChallenge(studentId, challengeType, realm = '{{{realm}}}') {
    const response = await fetch(`${this.baseUrl}/api/challenges/complete`, {
      method: 'POST',
      headers: this.headers(),
      body: JSON.stringify({ userId: studentId, challengeType, realm })
    });
    return response.json();
  }

  async getDailyThought(realm = '{{{realm}}}') {
    const response = await fetch(`${this.baseUrl}/api/luma/thought/${realm}`, {
      headers: this.headers()
    });
    return response.json();
  }
}

// Example usage:
const lumaAPI = new LumaWispAPI();

async function awardLumaPoints(studentId, challengeType) {
  const result = await lumaAPI.completeChallenge(studentId, challengeType);
  if (result.pointsAwarded) {
    updateStudentGrade(studentId, {
      activity: 'Luma Challenge',
      points: result.pointsAwarded.wispstars,
      maxPoints: 5,
      type: 'participation'
    });
  }
}"""


# ── Twine ────────────────────────────────────────────────

TWINE_MACROS = """\
:: Luma Wisp Macros [script]
/*
Luma Wisp Integration Macros for Twine (SugarCube) stories.
Paste into your story's JavaScript section.
*/

window.LumaWisp = {
  currentRealm: '{{{realm}}}',
  apiUrl: '{{{base_url}}}/api',
  greeting: '{{{greeting_js}}}',

  transformTo: async function(realm) {
    const response = await fetch(`${this.apiUrl}/luma/transform`, {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({ realm })
    });
    const data = await response.json();
    this.currentRealm = data.realm;
    this.greeting = data.greeting;
    return data.greeting;
  },

  speak: async function(message) {
    const response = await fetch(`${this.apiUrl}/luma/chat`, {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({ message, realm: this.currentRealm })
    });
    const data = await response.json();
    return data.response;
  }
};

Macro.add('luma', {
  handler: function() {
    $(this.output).append(`<div class="luma-dialogue">${window.LumaWisp.greeting}</div>`);
  }
});

Macro.add('lumaspeak', {
  handler: function() {
    $(this.output).append(`<p class="luma-thought">✨ ${this.args[0]}</p>`);
  }
});

Macro.add('lumatransform', {
  handler: function() {
    const out = $('<p class="luma-thought"></p>').appendTo(this.output);
    window.LumaWisp.transformTo(this.args[0]).then(function(greeting) {
      out.text(greeting);
    });
  }
});

Macro.add('lumaask', {
  handler: function() {
    const out = $('<p class="luma-thought">...</p>').appendTo(this.output);
    window.LumaWisp.speak(this.args[0]).then(function(reply) {
      out.text(reply);
    });
  }
});"""

TWINE_WIDGET = """\
<!-- Embedded Luma Wisp Widget for Twine Stories -->
<script src="{{{base_url}}}/luma-twine-widget.js"></script>

<div class="luma-story-widget" data-realm="{{{realm}}}" data-story-id="{{{story_id}}}">
  <div class="luma-companion">
    <div class="luma-avatar" id="luma-avatar">✨</div>
    <div class="luma-speech-bubble" id="luma-speech">
      <p>{{greeting}}</p>
    </div>
  </div>
</div>

<script>
document.addEventListener('DOMContentLoaded', function() {
  const lumaWidget = new LumaTwineWidget({
    container: '.luma-story-widget',
    realm: '{{{realm}}}',
    apiUrl: '{{{base_url}}}/api',
    position: 'companion', // companion, floating, inline
    size: 'medium',
    interactive: true,
    respondToChoices: true,
    rememberChoices: true
  });

  $(document).on(':passagedisplay', function(event) {
    lumaWidget.reactToPassage(event.passage.title);
  });
});
</script>"""

TWINE_STORY = """\
:: StoryTitle
The Academy of Remembrance

:: Start [startup]
<div id="luma-main-container"></div>
<<set $lumaRealm to "{{{realm}}}">>
<<set $lumaRelationship to 0>>
<<set $playerChoices to []>>
<<set $lumaApi to "{{{base_url}}}/api">>

<<luma>>

Welcome, young seeker, to a place where memories become magic and learning transforms into adventure.

//A shimmering figure materializes before you - Luma Wisp, your mystical guide.//

<<lumaspeak "Greetings, brave soul! Which realm calls to your heart first?">>

[[The Realm of Origins (Aether)->AetherIntro]]
[[The Fire Realm->FireIntro]]
[[The Water Realm->WaterIntro]]
[[The Earth Realm->EarthIntro]]
[[The Air Realm->AirIntro]]
{{#each realms}}

:: {{{title}}}Intro
<<set $lumaRealm to "{{{realm}}}">>
<<lumatransform "{{{realm}}}">>
<<set $lumaRelationship to $lumaRelationship + 1>>

<<lumaspeak "{{{greeting}}}">>

Here Luma teaches about {{{teachings}}}.

[[Ask Luma a question->{{{title}}}Question]]
[[Explore another realm->Start]]

:: {{{title}}}Question
<<set $playerChoices to $playerChoices.concat(["{{{realm}}}_question"])>>
<<lumaask "What can you teach me about {{{first_teaching}}}?">>

[[Explore another realm->Start]]
{{/each}}"""


_TEMPLATES: dict[str, dict[str, tuple[str, str]]] = {
    "lms": {
        "widget": (LMS_WIDGET, "html"),
        "iframe": (LMS_IFRAME, "html"),
        "api": (LMS_API, "js"),
    },
    "twine": {
        "macros": (TWINE_MACROS, "js"),
        "widget": (TWINE_WIDGET, "html"),
        "story": (TWINE_STORY, "tw"),
    },
}

# Host-side template variables emitted verbatim.
_HOST_PLACEHOLDERS = {
    "student_id": "{{student_id}}",
    "course_id": "{{course_id}}",
    "story_id": "{{STORY_ID}}",
}


def available_integrations() -> dict[str, list[str]]:
    return {platform: list(kinds) for platform, kinds in _TEMPLATES.items()}


def _js_string(text: str) -> str:
    return text.replace("\\", "\\\\").replace("'", "\\'")


def _realm_entry(personality: Personality) -> dict[str, str]:
    return {
        "realm": personality.realm,
        "title": personality.realm.capitalize(),
        "greeting": personality.greeting.replace('"', "'"),
        "teachings": ", ".join(personality.teachings),
        "first_teaching": personality.teachings[0],
    }


def render_integration(platform: str, kind: str, realm: Realm, base_url: str) -> Snippet:
    """Render one snippet. Raises IntegrationError for an unknown platform/kind."""
    try:
        template, ext = _TEMPLATES[platform][kind]
    except KeyError:
        raise IntegrationError(f"Unknown integration: {platform}/{kind}") from None

    personality = lookup(realm)
    context = {
        "realm": realm,
        "base_url": base_url.rstrip("/"),
        "greeting": personality.greeting,
        "greeting_js": _js_string(personality.greeting),
        "realms": [_realm_entry(p) for p in all_personalities()],
        **_HOST_PLACEHOLDERS,
    }
    return Snippet(
        platform=platform,
        kind=kind,
        realm=realm,
        filename=f"luma-{platform}-{kind}-integration.{ext}",
        code=render_prompt(template, context),
    )


def twine_state_macros(realm: Realm) -> dict[str, str]:
    """SugarCube one-liners a story can paste to sync with Luma's state."""
    personality = lookup(realm)
    greeting = personality.greeting.replace('"', '\\"')
    return {
        "lumaGreet": f'<<set $lumaGreeting to "{greeting}">>',
        "lumaSpeak": '<<widget "lumaSpeak">><<print _args[0]>><</widget>>',
        "lumaTransform": f'<<set $lumaRealm to "{realm}">>',
    }
